"""Customization hook applied to the model before resolution.

A hook is any callable taking the ``ProjectModel``. It may add, remove or
change objects and addresses and attach overrides to them. It runs once,
after the model is built. Returning ``False`` or raising aborts the
conversion, there is no partial result.

Hook files are plain Python modules exposing a ``customize`` function::

    def customize(model):
        for obj in model.objects.values():
            obj.overrides.initial_properties = {'name': f"{obj.name} {obj.room}"}
"""
import importlib.util
import logging
from pathlib import Path
from typing import Callable, Optional, Union

from .exceptions import HookError
from .models import ProjectModel

logger = logging.getLogger(__name__)

CustomizationHook = Callable[[ProjectModel], Optional[bool]]

HOOK_FUNCTION = 'customize'


def load_hook(hook_path: Union[str, Path]) -> CustomizationHook:
    """
    Import a hook file and return its ``customize`` function.

    Args:
        hook_path: Path to a Python file

    Returns:
        The hook callable

    Raises:
        HookError: If the file cannot be imported or has no ``customize``
    """
    path = Path(hook_path)
    if not path.is_file():
        raise HookError(f"Hook file not found: {path}")

    spec = importlib.util.spec_from_file_location(f"ets_to_hass_hook_{path.stem}", path)
    if spec is None or spec.loader is None:
        raise HookError(f"Cannot load hook file: {path}")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise HookError(f"Error importing hook file {path}: {exc}") from exc

    hook = getattr(module, HOOK_FUNCTION, None)
    if not callable(hook):
        raise HookError(f"Hook file {path} has no {HOOK_FUNCTION}(model) function")
    logger.debug("Loaded hook %s from %s", HOOK_FUNCTION, path)
    return hook


def apply_hook(model: ProjectModel, hook: CustomizationHook) -> ProjectModel:
    """
    Run the customization hook on the model.

    Args:
        model: Fully built project model, changed in place
        hook: Hook callable

    Returns:
        The same model

    Raises:
        HookError: If the hook already ran on this model, raised, or returned False
    """
    if model.hook_applied:
        raise HookError("Customization hook already applied to this model")
    model.hook_applied = True

    name = getattr(hook, '__name__', repr(hook))
    logger.info("Applying customization hook %s", name)
    try:
        result = hook(model)
    except Exception as exc:
        raise HookError(f"Customization hook {name} failed: {exc}") from exc
    if result is False:
        raise HookError(f"Customization hook {name} reported a failure")
    logger.debug("After hook: %s", model)
    return model
