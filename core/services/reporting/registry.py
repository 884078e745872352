"""
Report Template Registry

Maps report keys (e.g. 'resume.v1') to the template classes that build their
story.
"""

from typing import Any, Callable, Protocol

from reportlab.platypus import Flowable


class ReportTemplate(Protocol):
    """Interface every report template implements"""

    def build_story(self, context: dict) -> list[Flowable]:
        """Build the flowables for the report from context data"""
        ...

    def draw_page(self, canvas: Any, doc: Any, context: dict) -> None:
        """Optional: draw decorations on every page"""
        ...


class ReportRegistry:
    """Registry of report template factories"""

    def __init__(self):
        self._templates: dict[str, Callable[[], ReportTemplate]] = {}

    def register(self, report_key: str, template_factory: Callable[[], ReportTemplate]) -> None:
        """
        Register a template factory under a report key.

        Raises:
            ValueError: If the key is already taken
        """
        if report_key in self._templates:
            raise ValueError(f"Report template '{report_key}' is already registered")
        self._templates[report_key] = template_factory

    def get_template(self, report_key: str) -> ReportTemplate:
        """
        Instantiate the template registered for a key.

        Raises:
            KeyError: If the report key is not registered
        """
        try:
            factory = self._templates[report_key]
        except KeyError:
            raise KeyError(f"Report template '{report_key}' not found") from None
        return factory()

    def is_registered(self, report_key: str) -> bool:
        return report_key in self._templates


_registry = ReportRegistry()


def register_template(report_key: str, template_factory: Callable[[], ReportTemplate]) -> None:
    """Register a report template in the global registry"""
    _registry.register(report_key, template_factory)


def get_template(report_key: str) -> ReportTemplate:
    """Get a report template from the global registry"""
    return _registry.get_template(report_key)


def is_registered(report_key: str) -> bool:
    """Check if a report key is registered globally"""
    return _registry.is_registered(report_key)
