#!/usr/bin/env python3

import asyncio
import pathlib
import sys

# Add the project root to the path
project_root = str(pathlib.Path(__file__).resolve().parents[2])
sys.path.append(project_root) if project_root not in sys.path else None

from appconsole import (
    BootstrapConsole,
    ConsoleConfig,
    InstanceContainer,
    command,
    console,
    format_response,
)


class Inventory:
    def __init__(self):
        self.items = {"apple": 3, "pear": 1}


@console(name="stock", description="Inspect stock", alias="s")
class StockCommands:
    def __init__(self, inventory):
        self.inventory = inventory

    @command("list", description="List all items")
    def list(self):
        print(format_response(self.inventory.items))

    @command("count <item>", description="Count one item")
    async def count(self, item):
        await asyncio.sleep(0)
        print(self.inventory.items.get(item, 0))


@console(name="admin", parent="stock", description="Stock administration")
class AdminCommands:
    def __init__(self, inventory):
        self.inventory = inventory

    @command("reset", description="Remove all items")
    def reset(self):
        self.inventory.items.clear()
        print("cleared")


def create_application(config_path=None):
    """Wire the command classes to a shared inventory."""
    inventory = Inventory()
    container = (
        InstanceContainer()
        .register(StockCommands, factory=lambda: StockCommands(inventory))
        .register(AdminCommands, factory=lambda: AdminCommands(inventory))
    )
    return BootstrapConsole(
        [AdminCommands, StockCommands],
        config=ConsoleConfig.load(config_path),
        container=container,
    )


if __name__ == "__main__":
    # e.g. ./nested_groups.py stock admin reset
    sys.exit(create_application().boot())
