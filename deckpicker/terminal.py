"""Line oriented prompts on the controlling terminal."""

import typer


class ConsoleTerminal:
    """Write a prompt as-is (no added newline) and read one line of input."""

    def ask(self, prompt: str) -> str:
        typer.echo(prompt, nl=False)
        return input()
