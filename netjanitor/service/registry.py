from . import service
from ..runtime import DockerCliRuntime, InMemoryRuntime


def registerServices(testing: bool = False) -> None:
    """
    Register the runtime adapters by name.

    Args:
        testing: If True, clear services first
    """
    if testing:
        service().clear(thisIsATest=testing)

    service().register("runtime.docker", DockerCliRuntime)
    service().register("runtime.memory", InMemoryRuntime)


def runtimeNames():
    return service().runtime.names()
