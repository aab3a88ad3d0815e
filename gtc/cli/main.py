"""CLI Main Entry Point"""

import sys

from gtc.errors import GtcError, format_error_chain
from gtc.editor import LineEditor
from gtc.git import GitClient
from gtc.output import dim, print_error
from gtc.pipeline import Pipeline, PipelineResult
from gtc.translate import TransTranslator

from gtc.cli.args import parse_args


def build_pipeline(show_progress: bool = False) -> Pipeline:
    """Wire the real git, translate-shell and readline collaborators."""
    return Pipeline(
        git=GitClient(),
        translator=TransTranslator(),
        editor=LineEditor(),
        show_progress=show_progress,
    )


def _print_verbose_stats(result: PipelineResult) -> None:
    """Print per-step timings."""
    timings = result.timings
    print(dim(
        f"  Timings: git={timings.get('git', 0):.2f}s, translate={timings.get('translate', 0):.2f}s, "
        f"edit={timings.get('edit', 0):.2f}s, commit={timings.get('commit', 0):.2f}s"
    ))


def run(message: str, pipeline: Pipeline, verbose: bool = False) -> int:
    """Run the pipeline and turn any failure into exit status 1."""
    try:
        result = pipeline.run(message)
    except GtcError as e:
        print_error(format_error_chain(e))
        return 1

    if verbose:
        _print_verbose_stats(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    pipeline = build_pipeline(show_progress=sys.stdout.isatty())
    return run(args.message, pipeline, verbose=args.verbose)
