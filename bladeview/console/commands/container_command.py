"""
Container Commands
Commands for inspecting the service container
"""
from bladeview.console.command import Command


class ContainerCommand(Command):
    """Container inspection commands"""

    name = "container"
    description = "Container inspection operations"

    # List of subcommands for help display
    signature = [
        {"command": "container:list", "description": "List all registered container bindings"},
        {"command": "container:check", "args": "{binding}", "description": "Check if a specific binding exists"},
    ]

    async def handle(self, action: str = None, binding: str = None, **kwargs):
        """Handle container commands - routes to appropriate handler"""
        if action == 'list':
            return await self.handle_list()
        elif action == 'check':
            return await self.handle_check(binding=binding)
        else:
            self.error(f"Unknown action: {action}")
            return 1

    async def handle_list(self, **kwargs):
        """List all container bindings"""
        container = self.blade.get_container()
        bindings = container.get_bindings()

        if not bindings:
            self.error("No bindings registered in container")
            return 1

        singletons = sum(1 for info in bindings.values() if info['type'] == 'singleton')
        self.success(f"Found {len(bindings)} bindings ({singletons} singletons, "
                     f"{len(bindings) - singletons} factories)")
        self.line()
        self.line(container.list_bindings())
        return 0

    async def handle_check(self, binding: str = None, **kwargs):
        """Check if binding exists"""
        if not binding:
            self.error("Please provide a binding name")
            self.line()
            self.line("Usage: bladeview container:check {binding}")
            return 1

        container = self.blade.get_container()

        if not container.has(binding):
            self.error(f"Binding '{binding}' not found in container")
            return 1

        info = container.get_bindings()[binding]
        self.success(f"Binding '{binding}' exists")
        self.line(f"  Type: {info['type']}")

        if info['type'] == 'singleton':
            status = 'instantiated' if info['instantiated'] else 'lazy (not yet created)'
            self.line(f"  Status: {status}")

        return 0
