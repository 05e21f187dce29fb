"""Search the textures referenced by a material."""

from __future__ import annotations

import io
import json
from pathlib import Path

import click
from rich.markup import escape

from material_inspector.config import Config
from material_inspector.context import Context, pass_context
from material_inspector.exceptions import (
    ManifestError,
    ManifestNotFoundError,
    ManifestReadError,
)
from material_inspector.search.filters import (
    ColorSpaceFilter,
    StructuredFilterConfig,
    apply_filters,
)
from material_inspector.textures.manifest import load_manifest
from material_inspector.textures.models import TextureRecord
from material_inspector.utils.output import (
    THEME,
    console,
    create_table,
    debug,
    error,
    info,
    pager_print,
    verbose,
)

EXIT_SUCCESS = 0
EXIT_NO_RESULTS = 0
EXIT_USAGE_ERROR = 1
EXIT_MANIFEST_ERROR = 2

MANIFEST_HINT = 'A manifest needs "material" and a "textures" list of "property"/"texture" slots'

# Table columns: (header, style, justify)
COLUMNS: list[tuple[str, str | None, str]] = [
    ("Property", "texture.name", "left"),
    ("Field", None, "left"),
    ("Texture", None, "left"),
    ("Size", None, "right"),
    ("Format", None, "left"),
    ("Color", None, "left"),
    ("Crunch", None, "right"),
    ("Compression", None, "left"),
    ("Path", "path", "left"),
]


def build_filter_config(
    config: Config,
    *,
    min_res: int | None,
    max_res: int | None,
    no_resolution_filter: bool,
    crunched: bool | None,
    color_space: str | None,
    format_filter: str | None,
) -> StructuredFilterConfig:
    """Merge command-line overrides into the configured default filters."""
    filters = config.filter_config()

    if no_resolution_filter:
        filters.filter_by_resolution = False
    if min_res is not None:
        filters.min_resolution = min_res
    if max_res is not None:
        filters.max_resolution = max_res

    if crunched is not None:
        filters.filter_by_crunch = True
        filters.show_only_crunched = crunched

    if color_space is not None:
        filters.color_space = ColorSpaceFilter(color_space)
        filters.filter_by_color_space = filters.color_space is not ColorSpaceFilter.ALL

    if format_filter is not None:
        filters.format_filter = format_filter
        filters.filter_by_format = bool(format_filter.strip())

    return filters


def _display_label(record: TextureRecord) -> str:
    """Display name with [NORMAL]/[LINEAR] indicators."""
    label = escape(record.display_name)
    if record.import_info.is_normal_map:
        label += " [NORMAL]"
    elif record.import_info.is_linear:
        label += " [LINEAR]"
    return label


def _crunch_cell(record: TextureRecord) -> str:
    if not record.import_info.is_crunched:
        return ""
    return f"[texture.crunched]{record.import_info.crunch_quality}[/texture.crunched]"


def _color_cell(record: TextureRecord) -> str:
    label = record.color_space_label
    if record.import_info.is_normal_map:
        return f"[texture.normal]{label}[/texture.normal]"
    if record.import_info.is_linear:
        return f"[texture.linear]{label}[/texture.linear]"
    return label


@click.command("search")
@click.argument("manifest", type=click.Path(path_type=Path))
@click.argument("query", nargs=-1)
@click.option(
    "--min-res",
    type=int,
    default=None,
    help="Minimum size of the larger texture dimension (default from config)",
)
@click.option(
    "--max-res",
    type=int,
    default=None,
    help="Maximum size of the larger texture dimension (default from config)",
)
@click.option(
    "--no-resolution-filter",
    is_flag=True,
    default=False,
    help="Do not filter by resolution range",
)
@click.option(
    "--crunched/--not-crunched",
    "crunched",
    default=None,
    help="Keep only crunched / only non-crunched textures",
)
@click.option(
    "--color-space",
    type=click.Choice([c.value for c in ColorSpaceFilter]),
    default=None,
    help="Keep only one color-space class (default from config)",
)
@click.option(
    "--format-filter",
    "-F",
    default=None,
    help="Keep textures whose pixel format contains this text",
)
@click.option(
    "--output-format",
    "-f",
    "output_format",
    type=click.Choice(["table", "paths", "json"]),
    default="table",
    help="Output format (default: table)",
)
@click.option(
    "--limit",
    "-l",
    type=int,
    default=None,
    help="Limit number of results",
)
@pass_context
def cli(
    ctx: Context,
    manifest: Path,
    query: tuple[str, ...],
    min_res: int | None,
    max_res: int | None,
    no_resolution_filter: bool,
    crunched: bool | None,
    color_space: str | None,
    format_filter: str | None,
    output_format: str,
    limit: int | None,
) -> None:
    """Filter the textures of a material manifest.

    MANIFEST is a JSON file describing a material's texture slots. QUERY is
    an optional search string; multiple arguments are joined with spaces.

    \b
    Syntax:
      a,b        textures matching a AND b
      a|b        textures matching a OR b (pipe wins over comma)
      !a         textures NOT matching a
      >2048      larger dimension above 2048 (also <, >=, <=, =)
      2048<      2048 is smaller than the texture (same as >2048)
      2048>      2048 is bigger than the texture (same as <2048)

    \b
    Text terms search: display name, field name, texture name, asset path,
    format, size, color space (linear/srgb), crunched, normal, compression.

    \b
    Examples:
      material-inspector search rock.json "!crunched"
      material-inspector search rock.json ">=2048|<512"
      material-inspector search rock.json normal --color-space normal-maps
    """
    config = ctx.config if ctx.config is not None else Config()

    if limit is not None and limit < 0:
        error("--limit must not be negative")
        raise SystemExit(EXIT_USAGE_ERROR)

    filters = build_filter_config(
        config,
        min_res=min_res,
        max_res=max_res,
        no_resolution_filter=no_resolution_filter,
        crunched=crunched,
        color_space=color_space,
        format_filter=format_filter,
    )
    debug(f"Filters: {filters}")

    query_string = " ".join(query)

    try:
        material = load_manifest(manifest)
    except (ManifestNotFoundError, ManifestReadError) as e:
        error(str(e))
        raise SystemExit(EXIT_MANIFEST_ERROR)
    except ManifestError as e:
        error(str(e), hint=MANIFEST_HINT)
        raise SystemExit(EXIT_MANIFEST_ERROR)

    verbose(f"Loaded {len(material.textures)} textures from {manifest}")
    textures = apply_filters(material.textures, query_string, filters)
    total = len(material.textures)

    if not textures:
        if not ctx.quiet:
            shown = escape(query_string) or "(no query)"
            info(f"No textures on {escape(material.name)} match: {shown}")
        raise SystemExit(EXIT_NO_RESULTS)

    matched = len(textures)
    if limit is not None:
        textures = textures[:limit]
        if len(textures) < matched:
            verbose(f"Showing {len(textures)} of {matched} matches (--limit {limit})")

    if output_format == "table":
        _print_table(textures, material.name, query_string, total, show_title=not ctx.quiet)
    elif output_format == "paths":
        _print_paths(textures)
    elif output_format == "json":
        _print_json(textures)

    raise SystemExit(EXIT_SUCCESS)


def _print_table(
    textures: list[TextureRecord],
    material_name: str,
    query_string: str,
    total: int,
    show_title: bool = True,
) -> None:
    """Print results as a Rich table, using pager when appropriate."""
    from rich.console import Console

    title = f"{escape(material_name)}: {len(textures)} of {total} textures"
    if query_string:
        title += f" matching '{escape(query_string)}'"
    if show_title:
        info(title)

    table = create_table(show_header=True, header_style="bold")
    for header, style, justify in COLUMNS:
        kwargs: dict = {"justify": justify}
        if style:
            kwargs["style"] = style
        table.add_column(header, no_wrap=True, **kwargs)

    for t in textures:
        table.add_row(
            _display_label(t),
            escape(t.property_name),
            escape(t.texture_name),
            t.size_label,
            escape(t.pixel_format),
            _color_cell(t),
            _crunch_cell(t),
            t.import_info.compression_quality,
            escape(t.asset_path),
        )

    buf = io.StringIO()
    render_console = Console(
        file=buf,
        theme=THEME,
        force_terminal=not console.no_color,
        width=1000,
        no_color=console.no_color,
    )
    render_console.print(table)

    pager_print(buf.getvalue(), header_lines=3)


def _print_paths(textures: list[TextureRecord]) -> None:
    """Print one asset path per line (texture name if not an asset)."""
    for t in textures:
        click.echo(t.asset_path or t.texture_name)


def _print_json(textures: list[TextureRecord]) -> None:
    """Print results as JSON array."""
    results = []
    for t in textures:
        results.append(
            {
                "id": t.texture_id,
                "display_name": t.display_name,
                "property": t.property_name,
                "name": t.texture_name,
                "path": t.asset_path,
                "width": t.width,
                "height": t.height,
                "format": t.pixel_format,
                "is_crunched": t.import_info.is_crunched,
                "is_normal_map": t.import_info.is_normal_map,
                "is_linear": t.import_info.is_linear,
                "crunch_quality": t.import_info.crunch_quality,
                "compression_quality": t.import_info.compression_quality,
            }
        )
    click.echo(json.dumps(results, indent=2))
