"""CLI entry point for flowdiag."""

import logging
import sys

import click

from flowdiag.config import FlowInputs, OutputOptions, RenderOptions, TreeOptions
from flowdiag.errors import DiagramError
from flowdiag.export import deliver
from flowdiag.parsers import load_flow_graph
from flowdiag.renderers import emit
from flowdiag.tree import build_tree_graph
from flowdiag.types import Mode, OutputFormat

EPILOG = """\b
Defaults (tree mode):
  Built-in excludes: (^|/)(\\.git|node_modules|dist|build|\\.next|\\.cache)(/|$)

\b
Examples:
  flowdiag -r .. -d 2 -f mermaid -o diagram.mmd
  flowdiag --format dot --exclude '(^|/)(dist|build)(/|$)' > graph.dot
  flowdiag --flow --entries "Start,Validate,Process,Done" -o flow.mmd
  printf "A -> B\\nB -> C\\n" | flowdiag --flow -f dot > flow.dot
"""


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr, format="%(name)s - %(levelname)s - %(message)s")


@click.command(epilog=EPILOG)
@click.option("--mode", "-m", "mode", type=str, default="tree", help="Mode: tree|flow (default: tree)")
@click.option("--flow", "flow_shortcut", is_flag=True, help="Shortcut for --mode flow")
@click.option("--root", "-r", "root", type=str, default=".", help="Root directory to scan (tree mode)")
@click.option("--depth", "-d", "depth", type=int, default=3, help="Max depth to scan (tree mode, default: 3)")
@click.option("--format", "-f", "fmt", type=str, default="mermaid", help="Output format: mermaid|dot")
@click.option("--out", "-o", "out_file", type=str, default=None, help="Write output to FILE (default: stdout)")
@click.option("--render", "render_format", type=str, default=None, help="Render output with mmdc/dot (png|svg|pdf)")
@click.option("--render-out", "render_out", type=str, default=None, help="Rendered output file path")
@click.option("--render-only", "render_only", is_flag=True, help="Skip raw output; only render")
@click.option("--dirs-only", "dirs_only", is_flag=True, help="Include only directories (tree mode)")
@click.option("--files-only", "files_only", is_flag=True, help="Include only files (tree mode)")
@click.option("--include", "include", type=str, default=None, help="Include paths matching REGEX (full path)")
@click.option("--exclude", "exclude", type=str, default=None, help="Exclude paths matching REGEX (full path)")
@click.option("--no-default-excludes", "no_default_excludes", is_flag=True, help="Disable built-in excludes")
@click.option("--title", "title", type=str, default=None, help="Diagram title (Mermaid comment or DOT label)")
@click.option("--entry", "entries", multiple=True, help="Flow entry (repeatable, flow mode)")
@click.option("--entries", "entries_csv", type=str, default=None, help="Flow entries comma-separated (flow mode)")
@click.option("--entries-file", "entries_file", type=str, default=None, help="Flow entries, one per line")
@click.option("--flow-spec", "spec_lines", multiple=True, help="Flow spec line (repeatable, flow mode)")
@click.option("--flow-file", "spec_files", multiple=True, help="Flow spec file (repeatable, flow mode)")
@click.option("--prompt-entries", "--prompt-flow", "prompt", is_flag=True, help="Prompt for flow lines (TTY only)")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log progress to stderr")
def main(
    mode: str,
    flow_shortcut: bool,
    root: str,
    depth: int,
    fmt: str,
    out_file: str | None,
    render_format: str | None,
    render_out: str | None,
    render_only: bool,
    dirs_only: bool,
    files_only: bool,
    include: str | None,
    exclude: str | None,
    no_default_excludes: bool,
    title: str | None,
    entries: tuple[str, ...],
    entries_csv: str | None,
    entries_file: str | None,
    spec_lines: tuple[str, ...],
    spec_files: tuple[str, ...],
    prompt: bool,
    verbose: bool,
) -> None:
    """Diagram generator: emit a directory diagram or a flowchart from entries
    or a flow spec in Mermaid or Graphviz DOT."""
    _configure_logging(verbose)
    try:
        run_mode = Mode.Flow if flow_shortcut else Mode.parse(mode)
        output = OutputOptions(
            format=OutputFormat.parse(fmt),
            out_file=out_file or None,
            title=title or None,
            render=RenderOptions.from_flags(render_format, render_out, render_only),
        )
        if output.render is not None:
            output.render.validate(output.format)

        if run_mode is Mode.Flow:
            inputs = FlowInputs(
                entries=list(entries),
                entries_csv=entries_csv,
                entries_file=entries_file,
                spec_lines=list(spec_lines),
                spec_files=list(spec_files),
                prompt=prompt,
            )
            graph = load_flow_graph(inputs)
        else:
            options = TreeOptions(
                root=root,
                depth=depth,
                dirs_only=dirs_only,
                files_only=files_only,
                include=include or None,
                exclude=exclude or None,
                default_excludes=not no_default_excludes,
            )
            graph = build_tree_graph(options)

        deliver(emit(graph, output.format, output.title), output)
    except (DiagramError, OSError) as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
