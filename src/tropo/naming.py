from __future__ import annotations

from typing import Final

from tropo.errors import ConfigurationError

CONTROLLER_SUFFIX: Final = "Controller"


def controller_name_for(adapter_type: type) -> str:
    """Logical route name for a request handler type.

    A ``controller_name`` declared on the type wins. Otherwise the name is
    derived from ``<Name>Controller`` as ``<name>``.
    """

    declared = getattr(adapter_type, "controller_name", None)
    if isinstance(declared, str) and declared.strip():
        return declared.strip()

    type_name = adapter_type.__name__
    if not type_name.endswith(CONTROLLER_SUFFIX) or type_name == CONTROLLER_SUFFIX:
        raise ConfigurationError(
            f"{type_name} must end in '{CONTROLLER_SUFFIX}' or declare a controller_name."
        )
    return type_name[: -len(CONTROLLER_SUFFIX)].lower()
