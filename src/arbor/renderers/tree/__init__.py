from arbor.renderers.tree.config import TreeConfig  # noqa: F401
from arbor.renderers.tree.forest import Forest, UpdateOutcome  # noqa: F401
from arbor.renderers.tree.provider import TreeStateProvider  # noqa: F401
from arbor.renderers.tree.renderer import Tree  # noqa: F401
from arbor.renderers.tree.state import TreeState  # noqa: F401
