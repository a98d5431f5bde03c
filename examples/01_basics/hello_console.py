#!/usr/bin/env python3

import pathlib
import sys

# Add the project root to the path
project_root = str(pathlib.Path(__file__).resolve().parents[2])
sys.path.append(project_root) if project_root not in sys.path else None

from appconsole import BootstrapConsole, ConsoleConfig, command, console, option


@console()
class HelloCommands:
    @command("hello [name]", description="Say hello", alias="hi")
    @option("-l, --loud", description="Shout the greeting")
    def hello(self, name, command):
        text = f"hello, {name or 'world'}!"
        print(text.upper() if command.opts()["loud"] else text)

    @command("sum <numbers...>", description="Add numbers")
    def sum(self, numbers):
        print(sum(float(n) for n in numbers))


if __name__ == "__main__":
    config = ConsoleConfig(prog="hello_console", description="Minimal console app")
    sys.exit(BootstrapConsole([HelloCommands], config=config).boot())
