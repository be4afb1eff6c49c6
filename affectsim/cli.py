"""Click-based CLI for running the emotional agent.

Examples:

    # Respond to a few stimuli and print a summary
    affectsim --seed 42 --summary A "?" B

    # Interactive session, exporting the log afterwards
    affectsim --interactive --log experiences.json

    # Custom lexicon and an HTML report
    affectsim --lexicon words.json --visualize report.html hello world
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Optional, Sequence

import click

from affectsim.affect.lexicon import LexiconLoadError, load_lexicon
from affectsim.agent import Agent, Response
from affectsim.config import DEFAULT_HISTORY_LIMIT, AgentConfig, parse_history, parse_seed

logger = logging.getLogger(__name__)

# Value-taking options and the CommandOptions field each one fills
VALUE_OPTIONS = {
    "--history": "history_limit",
    "--seed": "seed",
    "--log": "log_path",
    "--lexicon": "lexicon_path",
    "--visualize": "visualize_path",
    "--export-summary": "summary_path",
}


@dataclass
class CommandOptions:
    """Values collected from the value-taking options."""

    history_limit: Optional[int] = None
    seed: Optional[int] = None
    log_path: Optional[Path] = None
    lexicon_path: Optional[Path] = None
    visualize_path: Optional[Path] = None
    summary_path: Optional[Path] = None


def _option_value(name: str, raw: Optional[str]):
    """Convert the raw argument of a value option, warning when it is unusable.

    Returns:
        The converted value, or None when `raw` is missing or invalid
    """
    if name == "--seed":
        seed = parse_seed(raw) if raw is not None else None
        if seed is None:
            detail = f", got {raw!r}" if raw is not None else ""
            logger.warning(f"--seed requires an unsigned integer argument{detail}. Ignoring option.")
        return seed

    if name == "--history":
        limit = parse_history(raw) if raw is not None else None
        if limit is None:
            detail = f", got {raw!r}" if raw is not None else ""
            logger.warning(f"--history expects an integer{detail}. Using {DEFAULT_HISTORY_LIMIT}.")
        return limit

    if not raw:
        logger.warning(f"{name} requires a file path. Ignoring option.")
        return None
    return Path(raw)


def parse_command_args(args: Sequence[str]) -> tuple[CommandOptions, list[str]]:
    """Split raw arguments into value options and stimuli.

    `--seed` and `--history` take the following argument only when it parses
    as their value; otherwise it stays a stimulus. Path options always take
    the following argument. Every option also accepts `--name=value`.

    Args:
        args: Arguments left over after click handled the flags

    Returns:
        Tuple of (options, stimuli in their original order)

    Example:
        >>> options, inputs = parse_command_args(["--seed", "abc", "A"])
        >>> options.seed, inputs
        (None, ['abc', 'A'])
    """
    options = CommandOptions()
    inputs: list[str] = []
    i = 0
    while i < len(args):
        name, sep, attached = args[i].partition("=")
        if name not in VALUE_OPTIONS:
            inputs.append(args[i])
            i += 1
            continue

        i += 1
        if sep:
            raw, following = attached, None
        else:
            following = args[i] if i < len(args) else None
            raw = following

        value = _option_value(name, raw)
        if value is not None and following is not None:
            i += 1

        if name == "--history" and value is None:
            value = DEFAULT_HISTORY_LIMIT
        if value is not None:
            setattr(options, VALUE_OPTIONS[name], value)

    return options, inputs


def _echo_response(stimulus: str, response: Response, agent: Agent) -> None:
    emotions = ", ".join(f"{emotion.value}: {value:.2f}" for emotion, value in agent.emotional_state().items())
    click.echo(
        f"Input: {stimulus}, Response: {response.action.value}, "
        f"Outcome: {response.outcome}, Emotions: [{emotions}]"
    )
    click.echo(f"Reflection: {response.reflection.message}")


def process_inputs(stimuli: Iterable[str], agent: Agent) -> int:
    """Respond to each stimulus, echoing the result. Returns the count processed."""
    count = 0
    for stimulus in stimuli:
        response = agent.respond(stimulus)
        _echo_response(stimulus, response, agent)
        count += 1
    return count


def run_interactive_session(agent: Agent) -> int:
    """Respond to stdin lines until a blank line or end of input."""
    click.echo("Interactive mode active. Submit input (empty line to finish):")
    stdin = click.get_text_stream("stdin")
    count = 0
    for line in stdin:
        line = line.rstrip("\r\n")
        if not line.strip():
            break
        response = agent.respond(line)
        _echo_response(line, response, agent)
        count += 1
    return count


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    }
)
@click.option("--interactive", is_flag=True, help="Read stimuli from stdin until a blank line")
@click.option("--summary", is_flag=True, help="Print the summary report after processing")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def cli(
    interactive: bool,
    summary: bool,
    verbose: bool,
    args: tuple[str, ...],
) -> None:
    """Drive the emotional agent with stimuli given as arguments or on stdin.

    Value options (mixed freely with the stimuli):

    \b
      --history N            Experiences listed in the summary (default 5);
                             prints the summary when N > 0
      --seed N               Unsigned 64-bit seed for reproducible runs
      --log PATH             Export the experience log as JSON
      --lexicon PATH         JSON lexicon overlaying the default stimuli
      --visualize PATH       Write an HTML report of the experiences
      --export-summary PATH  Write the summary report to a text file

    An argument that is not a valid --seed or --history value is treated
    as a stimulus.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    options, inputs = parse_command_args(args)

    overlay: dict = {}
    if options.lexicon_path is not None:
        try:
            overlay = load_lexicon(options.lexicon_path)
            click.echo(f"Loaded emotion lexicon from {options.lexicon_path}")
        except LexiconLoadError as e:
            logger.warning(f"Failed to load lexicon from {options.lexicon_path}: {e}")

    config = AgentConfig(seed=options.seed, lexicon=overlay)
    if options.history_limit is not None:
        config = replace(config, history_limit=options.history_limit)
    agent = Agent(config=config)

    if options.seed is not None:
        click.echo(f"Using deterministic seed: {options.seed}")
    else:
        logger.debug(f"Using entropy seed: {agent.seed}")

    if interactive:
        run_interactive_session(agent)
    else:
        process_inputs(inputs, agent)

    if summary or (options.history_limit is not None and options.history_limit > 0):
        click.echo(agent.summary_report())

    if options.log_path is not None:
        try:
            path = agent.export_experiences(options.log_path)
            click.echo(f"Experiences exported to {path}")
        except OSError as e:
            logger.warning(f"Failed to export experiences: {e}")

    if options.summary_path is not None:
        try:
            path = agent.export_summary(options.summary_path)
            click.echo(f"Summary exported to {path}")
        except OSError as e:
            logger.warning(f"Failed to export summary: {e}")

    if options.visualize_path is not None:
        try:
            path = agent.export_visualization(options.visualize_path)
            click.echo(f"Visualization exported to {path}")
        except OSError as e:
            logger.warning(f"Failed to export visualization: {e}")


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
