# Tabline Line Editor — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Tabline command grammars.

A YAML or TOML file describes the prompt text and the command tree used for
tab completion:

    prompt: "> "
    commands:
      - name: cat
        args:
          - --help
          - flag: --lines
            arguments:
              - name: n
                description: number of lines
          - name: file
            description: file to print
      - name: exit
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from tabline.completion import ArbitraryArgument, Argument, Command, Flag
from tabline.exceptions import GrammarConfigError
from tabline.logger import logger
from tabline.prompt import Prompt


def find_config() -> Path | None:
    candidates = [
        Path.cwd() / "tabline.yaml",
        Path.cwd() / "tabline.toml",
        Path(os.environ.get("TABLINE_CONFIG", "tabline.yaml")),
        Path.home() / ".config" / "tabline" / "tabline.yaml",
        Path.home() / ".config" / "tabline" / "tabline.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


class RawArbitraryArgument(BaseModel):
    """Free-form argument or flag value placeholder."""

    name: str
    description: str = ""

    def to_argument(self) -> ArbitraryArgument:
        return ArbitraryArgument(name=self.name, description=self.description)


class RawArgument(BaseModel):
    """Either a flag (`flag:`) or a free-form argument (`name:`).

    A bare string is shorthand for a flag without values.
    """

    flag: str | None = None
    arguments: list[RawArbitraryArgument] = Field(default_factory=list)
    name: str | None = None
    description: str = ""

    @model_validator(mode="before")
    @classmethod
    def expand_flag_shorthand(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"flag": value}
        return value

    @model_validator(mode="after")
    def validate_kind(self) -> RawArgument:
        if (self.flag is None) == (self.name is None):
            raise ValueError("Argument needs exactly one of 'flag' or 'name'.")
        if self.name is not None and self.arguments:
            raise ValueError(f"Free-form argument '{self.name}' cannot take 'arguments'.")
        return self

    def to_argument(self) -> Argument:
        if self.flag is not None:
            return Flag(
                name=self.flag,
                arguments=tuple(argument.to_argument() for argument in self.arguments),
            )
        return ArbitraryArgument(name=self.name or "", description=self.description)


class RawCommand(BaseModel):
    """Raw command model for Tabline grammar configuration."""

    name: str
    args: list[RawArgument] = Field(default_factory=list)
    subcommands: list[RawCommand] = Field(default_factory=list)

    def to_command(self) -> Command:
        return Command(
            name=self.name,
            args=tuple(argument.to_argument() for argument in self.args),
            subcommands=tuple(command.to_command() for command in self.subcommands),
        )


class PromptConfig(BaseModel):
    """Tabline prompt configuration model."""

    prompt: str = "> "
    commands: list[RawCommand] = Field(default_factory=list)
    history: list[str] = Field(default_factory=list)

    def to_commands(self) -> list[Command]:
        return [command.to_command() for command in self.commands]

    def to_prompt(self, **kwargs: Any) -> Prompt:
        return Prompt(
            self.prompt,
            self.to_commands(),
            history=list(self.history),
            **kwargs,
        )


def load_commands(raw_commands: list[dict[str, Any]]) -> list[Command]:
    """Convert raw command dictionaries into a command grammar."""
    try:
        return [RawCommand.model_validate(entry).to_command() for entry in raw_commands]
    except ValidationError as error:
        raise GrammarConfigError(f"Invalid command grammar:\n{error}") from error


def read_config(file_path: Path | str) -> PromptConfig:
    """
    Read and validate a Tabline configuration file.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.

    Returns:
        PromptConfig: The validated configuration.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported.
        GrammarConfigError: If the content does not describe a valid grammar.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise GrammarConfigError(
            "Configuration file must contain a dictionary with a list of commands.\n"
            "Example:\n"
            "prompt: '> '\n"
            "commands:\n"
            "  - name: cat\n"
            "    args: ['--help']"
        )

    try:
        config = PromptConfig.model_validate(raw_config)
    except ValidationError as error:
        raise GrammarConfigError(f"Invalid configuration in {path}:\n{error}") from error
    logger.debug("Loaded %d top-level commands from %s.", len(config.commands), path)
    return config


def loader(file_path: Path | str, **prompt_kwargs: Any) -> Prompt:
    """
    Build a `Prompt` from a YAML or TOML configuration file.

    Extra keyword arguments (`key_source`, `screen`, `raw_mode`) are passed on
    to `Prompt`.
    """
    return read_config(file_path).to_prompt(**prompt_kwargs)
