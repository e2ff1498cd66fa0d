
import pytest

from cpn_builder.application.net_factory import CpnNetFactory
from cpn_builder.config import BuilderConfig
from cpn_builder.domain.entities import CpnDocument
from cpn_builder.infrastructure.logging import NullLogger


@pytest.fixture(autouse=True)
def _clean_cpn_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CPN_* variables from the developer's shell out of the tests."""
    for name in (
        "CPN_SPACING_X",
        "CPN_SPACING_Y",
        "CPN_ID_PREFIX",
        "CPN_ID_SEED",
        "CPN_INDENT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> BuilderConfig:
    return BuilderConfig()


@pytest.fixture
def document(config: BuilderConfig) -> CpnDocument:
    return CpnDocument(config)


@pytest.fixture
def factory(config: BuilderConfig) -> CpnNetFactory:
    return CpnNetFactory(config, NullLogger())
