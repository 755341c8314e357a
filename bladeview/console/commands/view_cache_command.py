"""
View Cache Command
Compiles every known template ahead of the first request
"""
from bladeview.console.command import Command
from bladeview.defaults import DEFAULT_ENGINE
from bladeview.exceptions import CompileException


class ViewCacheCommand(Command):
    """Compile all Blade templates"""

    name = "view:cache"
    description = "Compile all of the application's Blade templates"
    signature = "view:cache"

    async def handle(self, **kwargs):
        factory = self.blade.get_factory()
        finder = factory.get_finder()
        compiler = self.blade.compiler()

        compiled = []
        for view in finder.known_views():
            path = finder.find(view)

            # Plain-file extensions have nothing to compile
            extension = factory.get_extension(path)
            if extension is None or factory.get_extensions()[extension] != DEFAULT_ENGINE:
                continue

            try:
                artifact = compiler.compile(path)
            except CompileException as e:
                self.error(f"Failed to compile [{view}]: {e}")
                return 1

            compiled.append((view, artifact))

        if not compiled:
            self.info("No templates found")
            return 0

        self.table(['View', 'Compiled'], compiled)
        self.line()
        self.success(f"Compiled {len(compiled)} templates into {compiler.get_cache_path()}")
        return 0
