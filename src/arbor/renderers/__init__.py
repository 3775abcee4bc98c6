from arbor.renderers.atomic import AtomicBaseRenderer  # noqa: F401
from arbor.renderers.stateful import StatefulBaseRenderer  # noqa: F401
