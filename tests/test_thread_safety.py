"""Thread isolation tests for independent Lexer sessions.

Each Lexer owns its state, so separate instances can run in parallel.
These tests use real threading to catch shared-state bugs.
"""

from concurrent.futures import ThreadPoolExecutor

from xmlscan import Lexer, Token


def _document(i: int) -> str:
    return f"<doc{i}>" + "".join(f"<item>{i}-{j}</item>" for j in range(50)) + f"</doc{i}>"


class TestIndependentLexers:
    """Verify separate lexers do not interfere."""

    def test_parallel_tokenize_matches_serial(self) -> None:
        sources = [_document(i) for i in range(16)]
        expected = [Lexer(s).tokenize() for s in sources]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results: list[list[Token]] = list(
                pool.map(lambda s: Lexer(s).tokenize(), sources)
            )

        assert results == expected

    def test_parallel_reuse_per_thread(self) -> None:
        """A lexer reused via reset() within one thread stays consistent."""

        def run(i: int) -> list[int]:
            lexer = Lexer()
            counts = []
            for j in range(10):
                lexer.reset(_document(i + j))
                counts.append(len(lexer.tokenize()))
            return counts

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(run, range(8)))

        assert all(counts == [152] * 10 for counts in results)
