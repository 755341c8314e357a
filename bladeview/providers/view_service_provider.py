"""
View Service Provider
"""
from bladeview.defaults import DEFAULT_ENGINE, DEFAULT_VIEW_EXTENSIONS
from bladeview.providers.service_provider import ServiceProvider
from bladeview.view.compilers import BladeCompiler
from bladeview.view.engines import CompilerEngine, EngineResolver
from bladeview.view.factory import Factory
from bladeview.view.finder import FileViewFinder


class ViewServiceProvider(ServiceProvider):
    """
    Register the view pipeline

    Expects 'files', 'events' and 'config' to be bound. Every binding uses
    bind_if, so anything registered beforehand wins.
    """

    def register(self):
        self.register_blade_compiler()
        self.register_engine_resolver()
        self.register_view_finder()
        self.register_factory()

    def register_blade_compiler(self):
        self.container.bind_if('blade.compiler', lambda c: BladeCompiler(
            c.make('files'), c.make('config').get('view.compiled')
        ))

    def register_engine_resolver(self):
        def build(c):
            resolver = EngineResolver()
            self.register_template_engine(resolver)
            return resolver

        self.container.bind_if('view.engine.resolver', build)

    def register_template_engine(self, resolver: EngineResolver):
        resolver.register(DEFAULT_ENGINE, lambda: CompilerEngine(self.container.make('blade.compiler')))

    def register_view_finder(self):
        self.container.bind_if('view.finder', lambda c: FileViewFinder(
            c.make('files'),
            c.make('config').get('view.paths'),
            c.make('config').get('view.extensions', DEFAULT_VIEW_EXTENSIONS),
        ))

    def register_factory(self):
        self.container.bind_if('view', lambda c: Factory(
            c.make('view.engine.resolver'),
            c.make('view.finder'),
            c.make('events'),
        ))
