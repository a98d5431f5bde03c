"""
Process entry point for console applications.

This module is the error boundary between the console service and the
operating system: it turns the outcome of a run into a process exit code.
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Iterable, Sequence

from .config import ConsoleConfig
from .console import Console
from .constants import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_SUCCESS
from .container import Container
from .errors import ConfigurationError, MissingArgumentError, ParserError
from .handler import ActionResponse
from .scanner import ConsoleScanner
from .service import ConsoleService


class BootstrapConsole:
    """
    Builds a console service from decorated classes and runs it.

    Example:
        if __name__ == "__main__":
            sys.exit(BootstrapConsole([DbCommands, UserCommands]).boot())
    """

    def __init__(
        self,
        classes: Iterable[type],
        config: ConsoleConfig | None = None,
        container: Container | None = None,
        service: ConsoleService | None = None,
        console: Console | None = None,
    ) -> None:
        self._classes = list(classes)
        self._config = config
        self._container = container
        self._service = service
        self._console = console or Console()
        self._initialized = False

    @property
    def service(self) -> ConsoleService:
        """The console service, initialized on first access."""
        if not self._initialized:
            self.init()
        assert self._service is not None
        return self._service

    def init(self) -> ConsoleService:
        """Load the config, create the service (unless given) and scan the classes."""
        if self._service is None:
            if self._config is None:
                self._config = ConsoleConfig.load()
            self._service = ConsoleService(
                config=self._config, container=self._container
            )
        elif self._container is not None:
            self._service.set_container(self._container)

        ConsoleScanner(self._service).scan(self._classes)
        self._initialized = True
        return self._service

    async def run(self, argv: Sequence[str] | None = None) -> ActionResponse | None:
        """Run the CLI; errors propagate."""
        return await self.service.init(list(sys.argv if argv is None else argv))

    def _report_missing_argument(self, error: MissingArgumentError) -> None:
        # The service does not log these
        command = error.command or self.service.get_cli()
        self._console.print_text(command.format_usage().rstrip())
        self._console.print_error(str(error))

    def boot(self, argv: Sequence[str] | None = None) -> int:
        """
        Run the CLI and return a process exit code.

        Returns:
            0 on success or help, the parser's exit code for parser errors,
            1 for any other error, 130 when interrupted
        """
        if not self._initialized:
            try:
                self.init()
            except ConfigurationError as e:
                self._console.print_error(str(e))
                return EXIT_FAILURE

        try:
            asyncio.run(self.run(argv))
            return EXIT_SUCCESS
        except MissingArgumentError as e:
            self._report_missing_argument(e)
            return e.exit_code
        except ParserError as e:
            return e.exit_code or EXIT_FAILURE
        except KeyboardInterrupt:
            self._console.print_warning("Aborted by user.")
            return EXIT_INTERRUPTED
        except Exception:
            # Already logged by the service
            return EXIT_FAILURE
