"""
Dashboard Tab for Admin Panel
"""
import flet as ft
from flet.plotly_chart import PlotlyChart
import plotly.graph_objects as go

from core.dashboard_service import get_dashboard_stats, chart_series
from core.errors import FetchError
from core.logger import get_recent_actions
from ui.admin_constants import STAT_TILES, PRIMARY
from ui.admin_utils import format_currency

def build_dashboard_tab(page: ft.Page, api, session, is_desktop: bool):
    """
    Build the Dashboard tab: stat tiles, a counts chart and recent admin activity

    Args:
        page: Flet page object
        api: ApiClient bound to the admin session
        session: Current AdminSession
        is_desktop: True if desktop layout, False if mobile

    Returns:
        ft.Column: tab content
    """
    body = ft.Column(spacing=15, scroll=ft.ScrollMode.AUTO, expand=True)

    def build_tile(title, value, color, icon):
        return ft.Container(
            content=ft.Row([
                ft.Column([
                    ft.Text(title, size=13, color="white70"),
                    ft.Text(value, size=28, weight="bold", color="white"),
                ], spacing=5, expand=True),
                ft.Text(icon, size=40)
            ], vertical_alignment=ft.CrossAxisAlignment.CENTER),
            bgcolor=color,
            border_radius=10,
            padding=20,
            col={"xs": 12, "sm": 6, "lg": 3}
        )

    def build_chart(stats):
        labels, values = chart_series(stats)
        fig = go.Figure(go.Bar(x=labels, y=values, marker_color=["#3B82F6", "#22C55E", "#EAB308"]))
        fig.update_layout(
            title=dict(text="Overview", font=dict(size=14)),
            height=320 if is_desktop else 240,
            margin=dict(l=40, r=20, t=40, b=40),
            font=dict(size=10)
        )
        return PlotlyChart(fig, expand=True)

    def build_activity():
        entries = get_recent_actions(limit=8)
        if not entries:
            return ft.Text("No recent activity", size=12, color="grey")
        return ft.Column([
            ft.Text(f"{entry.timestamp:%Y-%m-%d %H:%M} · {entry.admin_email} · {entry.action}", size=12, color="grey800")
            for entry in entries
        ], spacing=4)

    def show_error(msg):
        body.controls = [
            ft.Container(
                content=ft.Column([
                    ft.Text(f"Failed to load dashboard stats: {msg}", color="red700"),
                    ft.ElevatedButton("Retry", icon=ft.Icons.REFRESH, on_click=lambda e: load_stats())
                ], spacing=10),
                bgcolor="red50",
                border=ft.border.all(1, "red300"),
                border_radius=8,
                padding=15
            )
        ]
        page.update()

    # ===================== LOAD DATA =====================

    def load_stats():
        body.controls = [ft.Row([ft.ProgressRing(), ft.Text("Loading...")], alignment=ft.MainAxisAlignment.CENTER)]
        page.update()

        try:
            stats = get_dashboard_stats(api)
        except FetchError as ex:
            print(f"Dashboard load error: {ex.message}")
            show_error(ex.message)
            return

        tiles = []
        for title, attr, color, icon in STAT_TILES:
            value = getattr(stats, attr)
            display = format_currency(value) if attr == "total_revenue" else str(value)
            tiles.append(build_tile(title, display, color, icon))

        body.controls = [
            ft.ResponsiveRow(tiles, spacing=15, run_spacing=15),
            ft.Container(content=build_chart(stats), bgcolor="white", border_radius=10, padding=10),
            ft.Container(
                content=ft.Column([
                    ft.Text("Recent Activity", size=16, weight="bold"),
                    build_activity()
                ], spacing=8),
                bgcolor="white",
                border_radius=10,
                padding=15
            )
        ]
        page.update()

    load_stats()

    return ft.Container(
        content=ft.Column([
            ft.Text("Dashboard", size=24, weight="bold", color=PRIMARY),
            body
        ], expand=True, spacing=10),
        padding=15,
        expand=True
    )
