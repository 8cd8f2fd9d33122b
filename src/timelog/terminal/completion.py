from timelog import configuration
from timelog.repository.plugin import PluginRepository
from timelog.repository.record import RecordRepository
from timelog.service.error import TimelogError


def __load_paths() -> None:
    # Completion runs without the app callback, so resolve paths here
    configuration.load_config_path()
    configuration.load_path_configuration()


def complete_project(incomplete: str) -> list[str]:
    """Return list of projects seen in recorded entries for shell completion."""
    try:
        __load_paths()
        all_projects = RecordRepository().get_all_projects()
    except TimelogError:
        return []
    return [project for project in all_projects if project.startswith(incomplete)]


def complete_plugin(incomplete: str) -> list[str]:
    """Return list of installed plugins for shell completion."""
    try:
        __load_paths()
    except TimelogError:
        return []
    all_plugins = PluginRepository().list_plugins()
    return [plugin for plugin in all_plugins if plugin.startswith(incomplete)]
