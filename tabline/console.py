# Tabline Line Editor — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Tabline demo output."""
from rich.console import Console

console = Console()
