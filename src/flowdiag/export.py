"""Hand emitted diagram text to an external renderer (mmdc or dot).

The renderers are opaque converters: spec file in, image file out. The text is
written to the user's output file when there is one, otherwise to a temporary
file that is removed however the run ends.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
from pathlib import Path

import click

from flowdiag.config import OutputOptions, RenderOptions
from flowdiag.errors import RendererFailed, RendererUnavailable
from flowdiag.types import OutputFormat

logger = logging.getLogger(__name__)

_INSTALL_HINTS = {
    OutputFormat.Mermaid: ("mmdc", "Install Mermaid CLI to render."),
    OutputFormat.Dot: ("dot", "Install Graphviz to render."),
}


def derive_render_out(render: RenderOptions, out_file: str | None) -> str:
    """--render-out, else the --out path with the image extension, else diagram.<fmt>."""
    if render.image_out:
        return render.image_out
    base = out_file or "diagram"
    stem, _ = os.path.splitext(base)
    return f"{stem}.{render.image_format}"


def build_command(fmt: OutputFormat, executable: str, spec_path: str, image_path: str, image_format: str) -> list[str]:
    if fmt is OutputFormat.Mermaid:
        return [executable, "-i", spec_path, "-o", image_path]
    return [executable, f"-T{image_format}", spec_path, "-o", image_path]


def run_renderer(fmt: OutputFormat, spec_path: str, image_path: str, image_format: str) -> None:
    """Run mmdc/dot on spec_path; raise unless it exits 0 and writes image_path."""
    name, hint = _INSTALL_HINTS[fmt]
    executable = shutil.which(name)
    if executable is None:
        raise RendererUnavailable(f"{name} not found. {hint}")

    cmd = build_command(fmt, executable, spec_path, image_path, image_format)
    logger.debug("running %s", " ".join(cmd))
    result = subprocess.run(cmd)
    if result.returncode != 0:
        raise RendererFailed(f"{name} exited with status {result.returncode}")
    if not Path(image_path).exists():
        raise RendererFailed(f"{name} did not produce {image_path}")
    logger.info("rendered %s", image_path)


def write_text(path: str, text: str) -> None:
    Path(path).write_text(text, encoding="utf-8")


def render_diagram(text: str, output: OutputOptions, render: RenderOptions) -> str:
    """Write the diagram text where mmdc/dot can read it, render, return the image path."""
    image_path = derive_render_out(render, output.out_file)
    if output.out_file and not render.render_only:
        write_text(output.out_file, text)
        run_renderer(output.format, output.out_file, image_path, render.image_format)
        return image_path

    fd, spec_path = tempfile.mkstemp(prefix="flow.", suffix=f".{output.format.extension}")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        if not render.render_only:
            click.echo(text, nl=False)
        run_renderer(output.format, spec_path, image_path, render.image_format)
    finally:
        Path(spec_path).unlink(missing_ok=True)
    return image_path


def deliver(text: str, output: OutputOptions) -> None:
    """Send the emitted text to its sink: renderer, file, or stdout."""
    if output.render is not None:
        render_diagram(text, output, output.render)
    elif output.out_file:
        write_text(output.out_file, text)
    else:
        click.echo(text, nl=False)
