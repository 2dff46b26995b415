"""config_loading.py"""
from pathlib import Path

from tabline.__main__ import run_shell
from tabline.config import loader

prompt = loader(Path(__file__).parent / "tabline.yaml")

if __name__ == "__main__":
    raise SystemExit(run_shell(prompt))
