from tabline import Command, EndOfInputSignal, InterruptSignal, Prompt
from tabline.utils import setup_logging

setup_logging(log_filename="simple.log")

prompt = Prompt(
    "> ",
    [
        Command("print"),
        Command("echo"),
        Command("cat").arg("--help"),
        Command("exit"),
    ],
)

if __name__ == "__main__":
    while True:
        # read_commandline does all the reading and tab completion
        try:
            line = prompt.read_commandline()
        except EndOfInputSignal:
            print("exit")
            break
        except InterruptSignal:
            print("Ctrl+C pressed.")
            continue

        if not line:
            continue
        if line[0] == "exit":
            break
        if line[0] in ("print", "echo"):
            print(" ".join(line[1:]))
        else:
            print(f"Did not find '{line[0]}' command!")
