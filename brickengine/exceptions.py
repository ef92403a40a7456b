"""Exceptions raised by the engine."""


class BrickEngineError(Exception):
    """Base class for every error raised by the engine."""

    default_message = "An engine error occurred."

    def __init__(self, message=None):
        super().__init__(message if message is not None else self.default_message)

    @property
    def message(self):
        """The error message."""
        return self.args[0]


class GrandparentsNotSupportedError(BrickEngineError):
    """Raised when a parent is itself given a parent."""

    default_message = "The entity manager currently does not support grandparents."


class ChildAlreadyHasParentError(BrickEngineError):
    """Raised when an entity that already has a parent is given another."""

    default_message = "The given entity already has a parent.... kinda rude"


class ComponentNotFoundError(BrickEngineError):
    """Raised when a requested component is missing."""

    default_message = "The given entity id does not exist."


class EntityNotFoundError(BrickEngineError):
    """Raised when a requested entity is missing."""

    default_message = "The given entity id does not exist."


class NoPathError(BrickEngineError):
    """Raised when a JSON source that should be a path is not one."""

    default_message = "String needs to be a valid path and confirmed via the boolean"


class NoValidJsonOrPathError(BrickEngineError):
    """Raised when neither valid JSON nor a valid path was given."""

    default_message = "The path or JSON is not valid"


class ObjectOrTypeError(BrickEngineError):
    """Raised when a JSON value is missing or has the wrong type."""

    def __init__(self, type_name):
        self.type_name = type_name
        super().__init__(
            "JSON object unknown or type mismatch calling type " + type_name
        )


class AnotherSceneActiveError(BrickEngineError):
    """Raised when a scene is loaded on a layer that already holds one."""

    default_message = "Another scene is currently active, destroy it first"


class NoSceneActiveError(BrickEngineError):
    """Raised when no scene is active on the requested layer."""

    default_message = "There is no scene active as the given SceneType."