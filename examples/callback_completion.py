"""Tab completion from a plain function instead of a command grammar."""
from tabline import EndOfInputSignal, InterruptSignal, Prompt, prefix_completion, split
from tabline.split import starts_new_word

CITIES = ["London", "Lisbon", "New York", "San Francisco"]


def complete_line(text: str) -> list[str]:
    words = split(text)
    if not words or (len(words) == 1 and not starts_new_word(text)):
        return prefix_completion(words[0] if words else "", ["visit", "quit"])
    if words[0] == "visit":
        stub = "" if starts_new_word(text) else words[-1]
        return prefix_completion(stub, CITIES)
    return []


prompt = Prompt("travel> ", completion=complete_line)

if __name__ == "__main__":
    while True:
        try:
            line = prompt.read_commandline()
        except (EndOfInputSignal, InterruptSignal):
            break
        if line[:1] == ["quit"]:
            break
        if line[:1] == ["visit"]:
            print("Off to", ", ".join(line[1:]) or "nowhere")
