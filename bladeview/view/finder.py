"""
File View Finder
Resolves view identifiers ('name', 'dir.name', 'namespace::name') to files
"""
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from bladeview.defaults import DEFAULT_VIEW_EXTENSIONS, HINT_PATH_DELIMITER
from bladeview.exceptions import ViewNotFoundException
from bladeview.logging import getLogger
from bladeview.support.filesystem import Filesystem

logger = getLogger(__name__)

Hints = Union[str, Path, Sequence[Union[str, Path]]]


def _as_list(hints: Hints) -> List[str]:
    if isinstance(hints, (str, Path)):
        return [str(hints)]
    return [str(hint) for hint in hints]


class FileViewFinder:
    """
    Locate view files on disk

    Global names search the configured paths in order; namespaced names
    search only the hint directories registered for their namespace and
    never fall back to the global paths. Within a directory, extensions are
    tried in order. Resolved paths are cached per identifier; changes that
    reorder or replace search directories drop the affected entries.

    Example:
        finder = FileViewFinder(Filesystem(), ['/app/views'])
        finder.add_namespace('mail', '/app/vendor/mail')
        finder.find('pages.home')       # /app/views/pages/home.blade.html
        finder.find('mail::welcome')    # /app/vendor/mail/welcome.tpl
    """

    def __init__(
        self,
        files: Filesystem,
        paths: Sequence[Union[str, Path]],
        extensions: Optional[Sequence[str]] = None
    ):
        self.files = files
        self.paths: List[str] = _as_list(paths)
        self.views: Dict[str, str] = {}
        self.hints: Dict[str, List[str]] = {}
        self.extensions: List[str] = list(extensions or DEFAULT_VIEW_EXTENSIONS)

    def find(self, name: str) -> str:
        """
        Get the fully qualified location of the view

        Raises:
            ViewNotFoundException: If no candidate file exists
        """
        if name in self.views:
            return self.views[name]

        if self.has_hint_information(name):
            path = self.find_namespaced_view(name)
        else:
            path = self.find_in_paths(name, self.paths)

        self.views[name] = path
        return path

    def find_namespaced_view(self, name: str) -> str:
        """Get the path to a template with a named path"""
        namespace, view = self.parse_namespace_segments(name)
        return self.find_in_paths(view, self.hints[namespace], name)

    def parse_namespace_segments(self, name: str) -> Tuple[str, str]:
        """
        Split 'namespace::view' into its segments

        Raises:
            ViewNotFoundException: If the name is malformed or the namespace has no hints
        """
        segments = name.split(HINT_PATH_DELIMITER)

        if len(segments) != 2 or not all(segments):
            raise ViewNotFoundException(f"View [{name}] has an invalid name.")

        if segments[0] not in self.hints:
            raise ViewNotFoundException(f"No hint path defined for [{segments[0]}].")

        return segments[0], segments[1]

    def find_in_paths(self, name: str, paths: Sequence[str], display_name: Optional[str] = None) -> str:
        """Find the given view in the list of paths"""
        for path in paths:
            for file in self.get_possible_view_files(name):
                candidate = Path(path) / file
                if self.files.is_file(candidate):
                    return str(candidate)

        logger.debug("View [%s] not found in: %s", display_name or name, ', '.join(paths))
        raise ViewNotFoundException(f"View [{display_name or name}] not found.")

    def get_possible_view_files(self, name: str) -> List[str]:
        """Get an array of possible view files"""
        relative = name.replace('.', '/')
        return [f"{relative}.{extension}" for extension in self.extensions]

    def known_views(self) -> List[str]:
        """
        List every identifier resolvable from the global paths and the
        registered namespaces, in search order without duplicates
        """
        names: List[str] = []
        seen = set()

        sources = [(None, self.paths)] + [(ns, hints) for ns, hints in self.hints.items()]

        for namespace, directories in sources:
            for directory in directories:
                for file in self.files.all_files(directory):
                    view = self._view_name_for(file, Path(directory))
                    if view is None:
                        continue
                    if namespace is not None:
                        view = f"{namespace}{HINT_PATH_DELIMITER}{view}"
                    if view not in seen:
                        seen.add(view)
                        names.append(view)

        return names

    def _view_name_for(self, file: Path, directory: Path) -> Optional[str]:
        relative = file.relative_to(directory).as_posix()

        for extension in self.extensions:
            suffix = '.' + extension
            if relative.endswith(suffix) and len(relative) > len(suffix):
                stem = relative[:-len(suffix)]
                # Dots inside a file name cannot be addressed with dot notation
                if '.' in stem:
                    continue
                return stem.replace('/', '.')

        return None

    def add_location(self, location: Union[str, Path]) -> None:
        """Add a location to the finder"""
        self.paths.append(str(location))

    def prepend_location(self, location: Union[str, Path]) -> None:
        """Prepend a location to the finder"""
        self.paths.insert(0, str(location))
        self.forget_global_views()

    def add_namespace(self, namespace: str, hints: Hints) -> None:
        """Add a namespace hint to the finder (appended after existing hints)"""
        self.hints.setdefault(namespace, []).extend(_as_list(hints))

    def prepend_namespace(self, namespace: str, hints: Hints) -> None:
        """Prepend a namespace hint to the finder"""
        self.hints[namespace] = _as_list(hints) + self.hints.get(namespace, [])
        self.forget_namespace(namespace)

    def replace_namespace(self, namespace: str, hints: Hints) -> None:
        """Replace the namespace hints for the given namespace"""
        self.hints[namespace] = _as_list(hints)
        self.forget_namespace(namespace)

    def add_extension(self, extension: str) -> None:
        """Register an extension with the view finder (searched first)"""
        if extension in self.extensions:
            self.extensions.remove(extension)

        self.extensions.insert(0, extension)
        self.flush()

    def forget_namespace(self, namespace: str) -> None:
        """Drop cached lookups resolved through the given namespace"""
        prefix = namespace + HINT_PATH_DELIMITER
        self.views = {name: path for name, path in self.views.items() if not name.startswith(prefix)}

    def forget_global_views(self) -> None:
        """Drop cached lookups resolved through the global paths"""
        self.views = {
            name: path for name, path in self.views.items()
            if self.has_hint_information(name)
        }

    def flush(self) -> None:
        """Flush the cache of located views"""
        self.views = {}

    def has_hint_information(self, name: str) -> bool:
        """Returns whether or not the view name has any hint information"""
        return HINT_PATH_DELIMITER in name

    def get_paths(self) -> List[str]:
        return self.paths

    def get_views(self) -> Dict[str, str]:
        return self.views

    def get_hints(self) -> Dict[str, List[str]]:
        return self.hints

    def get_extensions(self) -> List[str]:
        return self.extensions
