from arbor.utilities.env.display import DisplayConfiguration
from arbor.utilities.env.l_system import LSystemConfiguration
from arbor.utilities.env.tree import TreeConfiguration


class Configuration(
    DisplayConfiguration,
    TreeConfiguration,
    LSystemConfiguration,
):
    """Aggregate environment configuration helpers."""
