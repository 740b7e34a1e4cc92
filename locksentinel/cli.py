"""CLI entry point: locksentinel.

Usage:
    locksentinel antd                               # is antd anywhere in pnpm-lock.yaml?
    locksentinel @ant-design/icons 4.8.3 -f path/to/pnpm-lock.yaml
    locksentinel -b compromised.txt --output report.tsv
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
import structlog

from locksentinel.audit import AuditEngine, AuditStatus
from locksentinel.core.config import AuditConfig
from locksentinel.core.logging import setup_logging
from locksentinel.exceptions import BatchFormatError, LockParseError
from locksentinel.expectations import parse
from locksentinel.lockfile import LockModel
from locksentinel.report import render_console, render_tsv

log = structlog.get_logger("locksentinel.cli")

# Exit code for unreadable input structure (lock file or batch header).
_EXIT_INPUT_ERROR = 2

_TAG_COLORS = {
    f"[{AuditStatus.FOUND.value.upper()}]": "green",
    f"[{AuditStatus.PARTIAL_MATCH.value.upper()}]": "yellow",
    f"[{AuditStatus.VERSION_MISMATCH.value.upper()}]": "magenta",
    f"[{AuditStatus.NOT_FOUND.value.upper()}]": "red",
}


def _colorize(text: str) -> str:
    lines = []
    for line in text.splitlines():
        for tag, color in _TAG_COLORS.items():
            if line.startswith(tag):
                line = click.style(tag, fg=color, bold=True) + line[len(tag) :]
                break
        lines.append(line)
    return "\n".join(lines)


def _read_text(path: str, what: str) -> str:
    file_path = Path(path)
    if not file_path.is_file():
        click.echo(f"Error: {what} '{path}' does not exist", err=True)
        sys.exit(1)
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error: cannot read {what} '{path}': {e}", err=True)
        sys.exit(1)


def _load_model(config: AuditConfig) -> LockModel:
    text = _read_text(config.lockfile, "lock file")
    try:
        return LockModel.load(text)
    except LockParseError as e:
        click.echo(f"Error: failed to parse '{config.lockfile}': {e}", err=True)
        sys.exit(_EXIT_INPUT_ERROR)


def _run_single(config: AuditConfig, model: LockModel, package: str) -> int:
    if config.verbose:
        click.echo(f"Lockfile version: {model.lockfile_version or 'unknown'}")
        click.echo(f"Looking for package: {package}")
        if config.version:
            click.echo(f"Requested version: {config.version}")
        click.echo("---")

    result = AuditEngine(model).query(package, config.version)
    click.echo(_colorize(render_console(result, verbose=config.verbose)))
    return 0 if result.status is AuditStatus.FOUND else 1


def _run_batch(config: AuditConfig, model: LockModel, batch_file: str) -> int:
    text = _read_text(batch_file, "batch file")
    try:
        batch = parse(text)
    except BatchFormatError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(_EXIT_INPUT_ERROR)

    if config.verbose:
        click.echo(f"Lockfile version: {model.lockfile_version or 'unknown'}")
        click.echo(f"Batch mode: {len(batch)} packages ({batch.format or 'empty'})")
        click.echo("---")

    audit_run = AuditEngine(model).run(
        batch.expectations, workers=config.workers, skipped=batch.skipped
    )
    click.echo(_colorize(render_console(audit_run, verbose=config.verbose)))

    if config.output:
        try:
            Path(config.output).write_text(render_tsv(audit_run), encoding="utf-8")
        except OSError as e:
            click.echo(f"Error: cannot write report '{config.output}': {e}", err=True)
            return 1
        click.echo(f"\nReport written to: {config.output}")
    return 0


@click.command()
@click.argument("package", required=False)
@click.argument("version", required=False)
@click.option("-f", "--file", "lockfile", default=None, help="Path to pnpm-lock.yaml")
@click.option("-v", "--verbose", is_flag=True, help="Show detailed information")
@click.option("-b", "--batch", default=None, help="Batch mode: path to a package list file")
@click.option("--output", default=None, help="Write a TSV report to this path (batch mode)")
@click.option("-j", "--workers", type=click.IntRange(min=1), default=None, help="Worker threads")
def main(
    package: str | None,
    version: str | None,
    lockfile: str | None,
    verbose: bool,
    batch: str | None,
    output: str | None,
    workers: int | None,
) -> None:
    """Check whether pnpm-lock.yaml contains a package, optionally at a version.

    Without VERSION any version matches.  A shorter VERSION such as ``1.0``
    matches every ``1.0.x`` release.
    """
    setup_logging(verbose)
    config = AuditConfig.from_env(
        lockfile=lockfile,
        package=package,
        version=version,
        batch=batch,
        output=output,
        verbose=verbose,
        workers=workers,
    )

    if not config.is_batch and not config.package:
        click.echo("Error: a package name or batch mode (-b/--batch) is required", err=True)
        sys.exit(1)

    model = _load_model(config)
    log.debug("cli.model_ready", lockfile=config.lockfile, occurrences=len(model))

    if config.batch is not None:
        code = _run_batch(config, model, config.batch)
    else:
        code = _run_single(config, model, config.package)
    sys.exit(code)


if __name__ == "__main__":
    main()
