"""
Admin Panel - Main Orchestrator
Builds the header and the tab bar, and only the selected tab's content
"""
import flet as ft

from core.api_client import ApiClient
from core.auth_service import logout
from core.config import APP_NAME
from core.logger import log_action
from core.session_manager import get_session, end_session
from ui.admin_constants import BREAKPOINT, PRIMARY
from ui.admin_dashboard import build_dashboard_tab
from ui.admin_users import build_users_tab
from ui.admin_categories import build_categories_tab
from ui.admin_products import build_products_tab
from ui.admin_orders import build_orders_tab

# route, label, icon, builder
ADMIN_TABS = [
    ("/", "Dashboard", ft.Icons.DASHBOARD, build_dashboard_tab),
    ("/users", "Users", ft.Icons.PEOPLE, build_users_tab),
    ("/categories", "Categories", ft.Icons.CATEGORY, build_categories_tab),
    ("/products", "Products", ft.Icons.FASTFOOD, build_products_tab),
    ("/orders", "Orders", ft.Icons.SHOPPING_BAG, build_orders_tab),
]

ADMIN_ROUTES = [route for route, _, _, _ in ADMIN_TABS]

def admin_view(page: ft.Page, route: str = "/"):
    """
    Main admin panel view - the tab matching `route` is built and loaded
    """
    session = get_session(page)
    if session is None:
        page.open(ft.SnackBar(ft.Text("Please log in to continue.")))
        page.go("/login")
        return

    page.title = APP_NAME
    api = ApiClient(session)
    is_desktop = (page.width or page.window.width or 0) > BREAKPOINT
    selected = ADMIN_ROUTES.index(route) if route in ADMIN_ROUTES else 0

    # ===================== BUILD TABS =====================

    tabs = []
    for index, (tab_route, label, icon, builder) in enumerate(ADMIN_TABS):
        if index == selected:
            content = builder(page, api, session, is_desktop)
        else:
            content = ft.Container()
        tabs.append(ft.Tab(text=label, icon=icon, content=content))

    def on_tab_change(e):
        page.go(ADMIN_ROUTES[e.control.selected_index])

    tab_bar = ft.Tabs(
        selected_index=selected,
        animation_duration=200,
        tabs=tabs,
        expand=True,
        on_change=on_tab_change,
        label_color=PRIMARY,
        unselected_label_color="black",
        indicator_color=PRIMARY,
        divider_color="grey300"
    )

    # ===================== HEADER & LOGOUT =====================

    def logout_user(e):
        log_action(session.email, "Logged out")
        logout(api)
        end_session(page)
        page.open(ft.SnackBar(ft.Text("Logged out successfully.")))
        page.go("/login")

    welcome = session.admin.username or session.email

    # ===================== BUILD UI =====================

    page.clean()
    page.add(
        ft.Column([
            ft.Container(
                content=ft.Row([
                    ft.Text(APP_NAME, size=22, weight="bold", color="white"),
                    ft.Row([
                        ft.Text(f"Welcome {welcome}", color="white", size=13, visible=is_desktop),
                        ft.ElevatedButton(
                            "Logout",
                            icon=ft.Icons.LOGOUT,
                            on_click=logout_user,
                            bgcolor="red700",
                            color="white"
                        )
                    ], spacing=10)
                ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                bgcolor=PRIMARY,
                padding=ft.padding.symmetric(horizontal=15, vertical=10)
            ),
            ft.Container(content=tab_bar, expand=True, bgcolor="grey50")
        ], expand=True, spacing=0)
    )
    page.update()
