"""
Tabline Line Editor

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any

from tabline.completion import Command
from tabline.config import find_config, loader
from tabline.console import console
from tabline.logger import logger
from tabline.prompt import Prompt
from tabline.signals import EndOfInputSignal, InterruptSignal
from tabline.utils import setup_logging


def default_commands() -> list[Command]:
    return [
        Command("print"),
        Command("echo"),
        Command("cat").arg("--help"),
        Command("exit"),
    ]


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="tabline",
        description="Demo shell with tab completion and history.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="YAML or TOML file describing the prompt and command grammar.",
    )
    parser.add_argument("-p", "--prompt", help="Prompt text (overrides the config).")
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write debug logs to this file.",
    )
    return parser


def build_prompt(args: Namespace, **prompt_kwargs: Any) -> Prompt:
    config_path = args.config or find_config()
    if config_path:
        prompt = loader(config_path, **prompt_kwargs)
    else:
        prompt = Prompt("> ", default_commands(), **prompt_kwargs)
    if args.prompt is not None:
        prompt.prompt_text = args.prompt
    return prompt


def run_shell(prompt: Prompt) -> int:
    """Read and dispatch command lines until `exit` or end of input."""
    while True:
        try:
            line = prompt.read_commandline()
        except EndOfInputSignal:
            console.print("exit")
            return 0
        except InterruptSignal:
            console.print("Ctrl+C pressed.")
            continue
        except OSError as error:
            logger.error("Reading error: %s", error)
            console.print(f"[bold red]Reading error:[/] {error}")
            return 1

        if not line:
            continue
        command, *arguments = line
        if command == "exit":
            return 0
        if command in ("print", "echo"):
            console.print(" ".join(arguments), markup=False, highlight=False)
        else:
            console.print(f"Did not find '{command}' command!", markup=False)


def main(argv: list[str] | None = None) -> Any:
    args = get_parser().parse_args(argv)
    if args.log_file:
        setup_logging(log_filename=args.log_file)
    return run_shell(build_prompt(args))


if __name__ == "__main__":
    sys.exit(main())
