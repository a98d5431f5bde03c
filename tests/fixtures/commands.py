"""
Decorated command classes and fixtures built from them.
"""

import asyncio

import pytest

from appconsole import ConsoleScanner, ConsoleService, command, console, option


@console(name="group2", description="Second group", alias="g2")
class NamedGroupCommands:
    def __init__(self):
        self.calls = []

    @command("subCommand2 <myArgument>", description="Echo the argument")
    def sub_command2(self, my_argument):
        self.calls.append(my_argument)
        return my_argument


@console()
class RootCommands:
    @command("hello [name]", alias="hi", description="Greet someone")
    def hello(self, name):
        return f"hello {name or 'world'}"

    @command("add <numbers...>")
    @option("-s, --scale <factor>", type=int, default=1)
    def add(self, numbers, command):
        return sum(int(n) for n in numbers) * command.opts()["scale"]

    @command("wait <value>")
    async def wait(self, value):
        await asyncio.sleep(0)
        return value.upper()

    @command("fail")
    def fail(self):
        raise RuntimeError("boom")


@console(name="nested", parent="group2")
class NestedCommands:
    @command("deep <x>")
    def deep(self, x, command):
        return {"x": x, "prog": command.prog}


CONSOLE_CLASSES = [NestedCommands, NamedGroupCommands, RootCommands]


@pytest.fixture
def console_classes() -> list[type]:
    """Decorated classes, a nested group listed before its parent."""
    return list(CONSOLE_CLASSES)


@pytest.fixture
def scanned_service(service: ConsoleService, console_classes) -> ConsoleService:
    """Console service with all decorated classes registered."""
    ConsoleScanner(service).scan(console_classes)
    return service
