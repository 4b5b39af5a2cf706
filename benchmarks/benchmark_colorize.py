"""Benchmark full colorize passes and per-keystroke edit handling.

Every keystroke triggers a full re-scan, so the per-edit cost is the
colorize cost of the whole text.

Run with:
    pytest benchmarks/benchmark_colorize.py -v --benchmark-only
"""

try:
    import pytest

    from socialspan import PatternKind, SocialView, SpannableText
    from socialspan.colorizer import build_annotations
    from socialspan.config import SocialConfig

    @pytest.mark.benchmark(group="colorize")
    def test_benchmark_build_annotations(benchmark, large_text):
        """Benchmark the pure scan of a large text, all kinds enabled."""
        colors = SocialConfig().colors

        def scan():
            build_annotations(large_text, enabled=PatternKind.ALL, colors=colors)

        benchmark(scan)

    @pytest.mark.benchmark(group="colorize")
    def test_benchmark_keystroke(benchmark, large_text):
        """Benchmark one typed character at the end of a large text."""
        host = SpannableText(large_text)
        view = SocialView(host)
        view.set_live_typing_watcher(PatternKind.HASHTAG, lambda v, t: None)
        host.insert(len(host.text), " #")

        def keystroke():
            host.insert(len(host.text), "a")

        benchmark(keystroke)

except ImportError:
    pass  # pytest not available
