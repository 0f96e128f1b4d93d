"""dockdesk: бэкенд десктопного менеджера контейнеров поверх docker CLI."""

__version__ = "0.1.0"
