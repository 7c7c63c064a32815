"""
Component registry for SahaRapor
Each feature component registers its service class here so the
health endpoint can report what the running app offers.
"""


class ComponentRegistry:
    """Registry of feature components and their service classes"""

    def __init__(self):
        self.components = {}

    def register_component(self, name, component_class):
        self.components[name] = component_class

    def get_component(self, name):
        return self.components.get(name)

    def names(self):
        """Sorted component names"""
        return sorted(self.components)


registry = ComponentRegistry()


def register_component(name):
    """Class decorator that adds a service class to the registry"""
    def decorator(component_class):
        registry.register_component(name, component_class)
        return component_class
    return decorator


__all__ = ['ComponentRegistry', 'registry', 'register_component']
