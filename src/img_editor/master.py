"""Master module - plugin task and route discovery from entry points."""

from importlib.metadata import entry_points
from typing import Any, Callable, cast

from fastapi import APIRouter

from .common.edit_module import EditModule
from .utils.imaging import ImagingBackend

# Type alias for route factory functions loaded from entry points
RouteFactory = Callable[[ImagingBackend | None], APIRouter]


def get_task_registry(imaging: ImagingBackend | None = None) -> dict[str, EditModule[Any]]:
    """Load all edit tasks from entry points.

    Discovers tasks from [project.entry-points."img_editor.tasks"]
    in pyproject.toml.

    Returns:
        Dict mapping task_type -> EditModule instance

    Raises:
        RuntimeError: If a plugin fails to load
    """
    registry: dict[str, EditModule[Any]] = {}

    for ep in entry_points(group="img_editor.tasks"):
        try:
            task_class = cast(type[EditModule[Any]], ep.load())
            task = task_class(imaging)
            registry[task.task_type] = task
        except Exception as e:
            raise RuntimeError(f"Failed to load task '{ep.name}': {e}") from e

    return registry


def create_master_router(imaging: ImagingBackend | None = None) -> APIRouter:
    """Dynamically aggregate all plugin routes from entry points.

    Discovers routes from [project.entry-points."img_editor.routes"]
    in pyproject.toml and creates a combined router.

    Args:
        imaging: ImagingBackend shared by all plugins (Pillow if None)

    Returns:
        Combined APIRouter with all plugin routes

    Raises:
        RuntimeError: If a plugin fails to load (missing dependency, etc.)

    Example:
        from fastapi import FastAPI
        from img_editor.master import create_master_router

        app = FastAPI()
        app.include_router(create_master_router(), prefix="/api")
    """
    master = APIRouter()

    for ep in entry_points(group="img_editor.routes"):
        try:
            create_router = cast(RouteFactory, ep.load())
            master.include_router(create_router(imaging))
        except Exception as e:
            # Plugin dependency missing = exception (fail fast)
            raise RuntimeError(f"Failed to load plugin '{ep.name}': {e}") from e

    return master


def get_available_plugins() -> list[str]:
    """Names of the route plugins registered as entry points, sorted."""
    return sorted(ep.name for ep in entry_points(group="img_editor.routes"))
