from arbor.renderers.l_system.grammar import LSystemEngine  # noqa: F401
from arbor.renderers.l_system.provider import \
    LSystemStateProvider  # noqa: F401
from arbor.renderers.l_system.renderer import LSystem  # noqa: F401
from arbor.renderers.l_system.state import LSystemState  # noqa: F401
from arbor.renderers.l_system.turtle import Turtle  # noqa: F401
