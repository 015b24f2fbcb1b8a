"""Command-line interface for the statement merger."""

import logging
import sys
from typing import List, Optional

import click

from .merger import StatementMerger
from .models.core import MergeResult
from .utils.config_manager import ConfigManager
from .utils.csv_writer import CSVExporter
from .utils.error_handler import ErrorCategory, ErrorHandler
from .utils.file_scanner import FileScanner
from .utils.presentation import render_table


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class StatementMergerCLI:
    """Wires configuration, file selection and merging for the CLI"""

    def __init__(self, config_path: Optional[str] = None):
        self.config_manager = ConfigManager(config_path)
        self.config = self.config_manager.load_config()
        self.error_handler = ErrorHandler(self.config.log_directory)
        if self.config_manager.config_error:
            self.error_handler.log_warning(
                self.config_manager.config_error,
                "INVALID_CONFIG",
                ErrorCategory.CONFIGURATION,
                file_path=self.config_manager.config_file
            )
        self.file_scanner = FileScanner()

    def run_merge(self,
                  file_paths: Optional[List[str]] = None,
                  directories: Optional[List[str]] = None,
                  recursive: bool = False) -> MergeResult:
        """Select files and merge them into one ordered result"""
        selected = self.file_scanner.collect(file_paths, directories, recursive)
        logger.info(f"Merging {len(selected)} file(s)")
        merger = StatementMerger(self.config, self.error_handler)
        return merger.merge_paths(selected)

    def export(self, result: MergeResult, output_directory: Optional[str] = None) -> Optional[str]:
        return CSVExporter(self.config).export(result.transactions, output_directory)


@click.group()
@click.option('--config', '-c', help='Path to configuration file')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config, verbose):
    """Statement Merger - Combine bank statement CSV exports into one file"""

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj['cli'] = StatementMergerCLI(config)


def _highlight_debit(line: str) -> str:
    return click.style(line, fg='red')


def _echo_result(result: MergeResult) -> None:
    if result.error:
        click.echo(f"✗ {result.error}")
    else:
        click.echo("✓ Merge completed successfully")
    click.echo(f"  Files merged: {result.files_processed}")
    click.echo(f"  Total transactions: {len(result.transactions)}")


@cli.command()
@click.argument('files', nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option('--directory', '-d', 'directories', multiple=True,
              type=click.Path(exists=True, file_okay=False), help='Directories to scan for CSV files')
@click.option('--recursive', '-r', is_flag=True, help='Scan directories recursively')
@click.option('--output-dir', '-o', help='Directory for the combined CSV file')
@click.option('--isolate-failures', is_flag=True, help='Skip failing files instead of aborting the merge')
@click.option('--preview', is_flag=True, help='Print the merged transactions')
@click.pass_context
def merge(ctx, files, directories, recursive, output_dir, isolate_failures, preview):
    """Merge statement files into one combined CSV"""

    cli_instance = ctx.obj['cli']
    if isolate_failures:
        cli_instance.config_manager.update_config({'isolate_failures': True})

    if not files and not directories:
        click.echo("✗ No input files selected")
        sys.exit(1)

    result = cli_instance.run_merge(list(files), list(directories), recursive)
    _echo_result(result)

    if preview and result.transactions:
        click.echo(render_table(result.transactions, _highlight_debit))

    output_file = cli_instance.export(result, output_dir)
    if output_file:
        click.echo(f"  Output: {output_file}")
    elif result.success:
        click.echo("  Nothing to export")

    if not result.success:
        sys.exit(1)


@cli.command()
@click.argument('files', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def preview(ctx, files):
    """Show merged transactions without writing a file"""

    cli_instance = ctx.obj['cli']
    result = cli_instance.run_merge(list(files))

    if not result.success:
        click.echo(f"✗ {result.error}")
        sys.exit(1)

    click.echo(render_table(result.transactions, _highlight_debit))


@cli.command()
@click.argument('output_path', default='merger_config.json')
@click.option('--format', type=click.Choice(['json', 'yaml']), default='json', help='Configuration file format')
@click.pass_context
def init_config(ctx, output_path, format):
    """Generate configuration template file"""

    cli_instance = ctx.obj['cli']

    if format == 'yaml' and not output_path.endswith(('.yml', '.yaml')):
        output_path = output_path.replace('.json', '.yml')
    elif format == 'json' and not output_path.endswith('.json'):
        output_path = output_path.replace('.yml', '.json').replace('.yaml', '.json')

    try:
        cli_instance.config_manager.save_config_template(output_path)
        click.echo(f"✓ Configuration template generated: {output_path}")
    except OSError as e:
        click.echo(f"✗ Error generating config template: {str(e)}")
        sys.exit(1)


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
