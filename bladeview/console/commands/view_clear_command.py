"""
View Clear Command
Removes compiled templates from the view cache
"""
from bladeview.console.command import Command


class ViewClearCommand(Command):
    """Clear all compiled view files"""

    name = "view:clear"
    description = "Clear all compiled view files"
    signature = "view:clear"

    async def handle(self, **kwargs):
        compiler = self.blade.compiler()
        files = self.blade.get_container().make('files')
        cache_path = compiler.get_cache_path()

        pattern = f"*.{compiler.compiled_extension}"
        removed = sum(1 for artifact in files.glob(pattern, cache_path) if files.delete(artifact))

        if not removed:
            self.info("No compiled views to clear")
            return 0

        self.success(f"Cleared {removed} compiled views from {cache_path}")
        return 0
