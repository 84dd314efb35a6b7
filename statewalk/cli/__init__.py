"""CLI interface for statewalk.

Commands:

\b
  statewalk new 7              Create solutions/day07.py from the template
  statewalk run day07          Solve both parts of a day against its input
"""

import logging
from importlib.resources import files
from pathlib import Path

import click
from dotenv import load_dotenv

from statewalk import __version__
from statewalk.cli.log_config import configure_cli_logging
from statewalk.cli.utils import console, format_duration, output_table, validate_file
from statewalk.parse import ParseError
from statewalk.scaffold import load_problem, solve, solve_part1, solve_part2
from statewalk.settings import get_inputs_dir, get_log_level, get_solutions_dir

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show the statewalk version and exit.")
@click.pass_context
def main(ctx: click.Context, version: bool) -> None:
    """statewalk - state-space search toolkit and puzzle runner.

    \b
      statewalk new DAY        Scaffold a solution module for DAY
      statewalk run MODULE     Parse input and print both answers
    """
    if version:
        click.echo(__version__)
        ctx.exit()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _console_level(verbose: bool = False) -> int:
    if verbose:
        return logging.INFO
    try:
        return logging.getLevelName(get_log_level())
    except ValueError as e:
        raise click.ClickException(str(e)) from e


def render_template(day: int) -> str:
    """Solution module source for ``day`` (two-digit padded)."""
    template = files("statewalk").joinpath("templates").joinpath("day.py.tmpl").read_text()
    return template.replace("_N_", f"{day:02d}")


@main.command()
@click.argument("day", type=click.IntRange(min=1))
@click.option(
    "--dir",
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Target directory (default: [tool.statewalk].solutions-dir).",
)
@click.option("--force", is_flag=True, help="Overwrite an existing module.")
def new(day: int, directory: Path | None, force: bool) -> None:
    """Create a solution module for DAY from the template."""
    configure_cli_logging("new", console_level=_console_level())
    directory = directory or get_solutions_dir()
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / f"day{day:02d}.py"
    try:
        with target.open("w" if force else "x", encoding="utf-8") as fh:
            fh.write(render_template(day))
    except FileExistsError:
        raise click.ClickException(
            f"{target} already exists (use --force to overwrite)"
        ) from None
    logger.info("Created %s", target)
    click.echo(f"Created {target}")


def _default_input(target: str) -> Path:
    stem = Path(target).stem if target.endswith(".py") else target.rsplit(".", 1)[-1]
    return get_inputs_dir() / f"{stem}.txt"


@main.command()
@click.argument("target")
@click.option(
    "--input",
    "-i",
    "input_path",
    callback=validate_file,
    default=None,
    help="Input file (default: <inputs-dir>/<module>.txt).",
)
@click.option("--part", type=click.Choice(["1", "2"]), default=None, help="Solve one part only.")
@click.option("--verbose", "-v", is_flag=True, help="Log progress at INFO level.")
def run(target: str, input_path: Path | None, part: str | None, verbose: bool) -> None:
    """Solve the puzzle defined in TARGET (module name or .py file)."""
    log_file = configure_cli_logging("run", console_level=_console_level(verbose))
    logger.debug("Logging to %s", log_file)

    try:
        problem = load_problem(target)
    except (ImportError, FileNotFoundError, LookupError) as e:
        raise click.ClickException(str(e)) from e

    input_path = input_path or _default_input(target)
    if not input_path.is_file():
        raise click.ClickException(f"Input file not found: {input_path}")
    raw_input = input_path.read_text(encoding="utf-8")

    try:
        if part == "1":
            click.echo(f"Part 1: {solve_part1(problem, raw_input)}")
        elif part == "2":
            click.echo(f"Part 2: {solve_part2(problem, raw_input)}")
        else:
            answers = solve(problem, raw_input, console=console)
            output_table(
                problem.__name__,
                [("Elapsed", "dim")],
                [[format_duration(answers.elapsed)]],
            )
    except ParseError as e:
        raise click.ClickException(f"{input_path}: {e}") from e


if __name__ == "__main__":
    main()
