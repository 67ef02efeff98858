"""Command-line interface for the Field Stripper."""

import logging
import sys
import click
from . import __version__
from .models import StripConfig, DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH
from .transformer import FieldStrippingTransformer
from .area_parser import AreaTreeBuilder, DEFAULT_CODES_PATH
from .utils.validation import ValidationUtils


@click.group()
@click.version_option(version=__version__)
def main():
    """Field Stripper - Remove ancestry fields from nested JSON documents."""
    pass


@main.command()
@click.option('--input', '-i', 'input_path', default=DEFAULT_INPUT_PATH, show_default=True,
              type=click.Path(dir_okay=False), help='JSON file to read')
@click.option('--output', '-o', 'output_path', default=DEFAULT_OUTPUT_PATH, show_default=True,
              type=click.Path(dir_okay=False), help='JSON file to write')
@click.option('--field', '-f', 'fields', multiple=True,
              help='Field to remove; repeat to replace the default set (parentIds, parentNames, fullName)')
@click.option('--indent', default=2, show_default=True, type=click.IntRange(min=0),
              help='Spaces per indentation level in the output')
@click.option('--dry-run', is_flag=True, help='Strip without writing the output file')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def strip(input_path: str, output_path: str, fields, indent: int, dry_run: bool, verbose: bool):
    """Remove the forbidden fields from every object in a JSON file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s"
    )

    if fields:
        field_validation = ValidationUtils.validate_field_names(fields)
        if not field_validation.is_valid:
            click.echo("❌ Invalid --field value:", err=True)
            for error in field_validation.errors:
                click.echo(f"   • {error.message} ({error.location})", err=True)
            sys.exit(1)
        for warning in field_validation.warnings:
            click.echo(f"⚠️  {warning}", err=True)

    config = StripConfig().with_overrides(
        input_path=input_path,
        output_path=output_path,
        forbidden_fields=fields or None,
        indent=indent
    )
    click.echo(f"Stripping {', '.join(sorted(config.forbidden_fields))} from {input_path}...")

    transformer = FieldStrippingTransformer(config)
    result = transformer.strip_file(dry_run=dry_run)

    if not result.success:
        click.echo("❌ Strip operation failed:", err=True)
        for error in result.errors or []:
            click.echo(f"   • {error}", err=True)
        sys.exit(1)

    statistics = result.statistics
    if dry_run:
        click.echo(f"🔍 Dry run: {statistics.fields_removed} fields would be removed, "
                   f"{output_path} not written")
    else:
        click.echo(f"✅ Fields removed, result saved to {result.output_path}")

    for name in sorted(config.forbidden_fields):
        click.echo(f"   • {name}: {statistics.removed_by_field.get(name, 0)}")
    click.echo(f"📊 {result.input_size} bytes -> {result.output_size} bytes, "
               f"{statistics.objects_visited} objects visited")

    if verbose and transformer.profiler:
        summary = transformer.profiler.get_performance_summary()
        if summary["total_operations"]:
            click.echo(f"⏱️  {summary['total_duration']:.3f}s, "
                       f"peak memory {summary['max_memory_peak_mb']:.1f} MB, "
                       f"size ratio {summary['overall_size_ratio']:.2f}")


@main.command()
@click.option('--input', '-i', 'input_path', default=DEFAULT_CODES_PATH, show_default=True,
              type=click.Path(dir_okay=False), help='Division-code text file ("name code" per line)')
@click.option('--output', '-o', 'output_path', default=DEFAULT_INPUT_PATH, show_default=True,
              type=click.Path(dir_okay=False), help='JSON file to write')
@click.option('--indent', default=2, show_default=True, type=click.IntRange(min=0),
              help='Spaces per indentation level in the output')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def build(input_path: str, output_path: str, indent: int, verbose: bool):
    """Build the administrative-area tree with ancestry fields from division codes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s"
    )

    click.echo(f"Building area tree from {input_path}...")
    result = AreaTreeBuilder().build_file(input_path, output_path, indent=indent)

    if not result.success:
        click.echo("❌ Build failed:", err=True)
        for error in result.errors or []:
            click.echo(f"   • {error}", err=True)
        sys.exit(1)

    click.echo(f"✅ Area tree saved to {result.output_path}")
    click.echo(f"📊 {result.province_count} provinces, {result.area_count} areas, "
               f"{result.output_size} bytes")
    if result.skipped_lines:
        click.echo(f"⚠️  {result.skipped_lines} lines skipped", err=True)


if __name__ == '__main__':
    main()
