"""Kida environment setup.

Creates a kida Environment from the site configuration. The environment
is created once at start and shared by the render surface.
"""

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from wren.config import SiteConfig
from wren.rendering.filters import BUILTIN_FILTERS


def create_environment(config: SiteConfig) -> Environment:
    """Create a kida Environment from site configuration.

    A configured ``template_dir`` is searched before the bundled
    templates, so sites can override any page template by name.
    """
    loaders = []
    if config.template_dir is not None:
        loaders.append(FileSystemLoader(str(config.template_dir)))
    loaders.append(PackageLoader("wren", "templates"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.update_filters(BUILTIN_FILTERS)
    env.add_global("site_title", config.site_title)
    return env
