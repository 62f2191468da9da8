from collections.abc import Iterable

from dishka import AsyncContainer, Provider, from_context, make_async_container

from tripproxy.config import Config
from tripproxy.domain.trip.util.di import TripProvider
from tripproxy.infrastructure.http import HttpProvider
from tripproxy.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(
    config: Config | None = None,
    infrastructure: Iterable[Provider] | None = None,
) -> AsyncContainer:
    """Build the application container.

    Args:
        config: Settings to expose; read from the environment when omitted.
        infrastructure: Providers for the ports (TripFetcher). Defaults to the
            real HTTP adapters; tests pass in-memory ones instead.
    """
    if config is None:
        # Pydantic Settings populates from env vars at runtime
        config = Config()  # type: ignore[call-arg]
    if infrastructure is None:
        infrastructure = [HttpProvider()]

    return make_async_container(
        ConfigProvider(),
        TripProvider(),
        *infrastructure,
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
