from typing import Any

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from locationmanager.configuration import LocationConfiguration

NOT_USED = "[dim]not used[/dim]"


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "[green]yes[/green]" if value else "[red]no[/red]"
    if isinstance(value, float):
        return f"{value:.1f}"
    if isinstance(value, tuple):
        return escape(", ".join(str(v) for v in value)) or "-"
    if hasattr(value, "value"):
        return str(value.value)
    return escape(str(value)) if value != "" else "-"


class ConfigurationSummary:
    """Renders a built location configuration as a rich panel."""

    def __init__(self, configuration: LocationConfiguration) -> None:
        self.configuration = configuration
        self.columns = [
            {"header": "Section", "style": "cyan"},
            {"header": "Setting"},
            {"header": "Value", "justify": "right"},
        ]

    def rows(self) -> list[tuple[str, str, str]]:
        config = self.configuration
        rows = [("location", "keep_tracking", _format_value(config.keep_tracking))]

        provider = config.permission_configuration.permission_provider
        rows.append(("permission", "provider", escape(provider.name)))
        rows.append(
            ("permission", "required_permissions", _format_value(provider.required_permissions))
        )
        rows.append(
            ("permission", "rationale_message", _format_value(provider.rationale_message))
        )

        gp_services = config.gp_services_configuration
        if gp_services is None:
            rows.append(("google_play_services", "-", NOT_USED))
        else:
            for name, value in gp_services.location_request:
                rows.append(("google_play_services", f"request.{name}", _format_value(value)))
            for name, value in gp_services:
                if name == "location_request":
                    continue
                rows.append(("google_play_services", name, _format_value(value)))

        default_providers = config.default_provider_configuration
        if default_providers is None:
            rows.append(("default_providers", "-", NOT_USED))
        else:
            for name, value in default_providers:
                rows.append(("default_providers", name, _format_value(value)))
            rows.append(
                (
                    "default_providers",
                    "ask_for_gps_enable",
                    _format_value(default_providers.ask_for_gps_enable),
                )
            )
        return rows

    def __rich__(self) -> Panel:
        table = Table.grid(padding=(0, 2), expand=True)
        for column in self.columns:
            table.add_column(**column)
        header = [f"[b]{c['header']}[/b]" for c in self.columns]
        table.add_row(*header)

        for row in self.rows():
            table.add_row(*row)

        return Panel(
            table, title="Location Configuration", border_style="cyan", padding=(1, 2)
        )
