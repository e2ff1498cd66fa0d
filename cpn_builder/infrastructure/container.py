from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.build_example_use_case import (
    BuildExampleDependencies,
    BuildExampleUseCase,
)
from ..application.net_factory import CpnNetFactory
from ..config import BuilderConfig
from .io.cpn_writer import CpnFileWriter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ..application.ports.services import CpnWriterPort, LoggerPort


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: BuilderConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or BuilderConfig()
        self._logger_instance: LoggerPort | None = None
        self._writer_instance: CpnWriterPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_writer(self) -> CpnWriterPort:
        if self._writer_instance is None:
            self._writer_instance = CpnFileWriter(self.config)
        return self._writer_instance

    def create_net_factory(self) -> CpnNetFactory:
        """A fresh factory (and document) on every call."""
        return CpnNetFactory(self.config, self.create_logger())

    def create_build_example_use_case(self) -> BuildExampleUseCase:
        dependencies = BuildExampleDependencies(
            logger=self.create_logger(),
            writer=self.create_writer(),
        )
        return BuildExampleUseCase(dependencies)

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._writer_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_writer(self, writer: CpnWriterPort) -> None:
        self._writer_instance = writer


def create_default_container(
    verbose: int = 0, config: BuilderConfig | None = None
) -> DependencyContainer:
    return DependencyContainer(verbose=verbose, config=config)
