import os
import threading
import time
import flet as ft

from core.config import APP_NAME, SESSION_CHECK_INTERVAL
from core.db import init_tables
from core.logger import log_action
from core.session_manager import SESSION_KEY, get_session, end_session

from ui.login_view import login_view
from ui.admin_view import admin_view, ADMIN_ROUTES

PUBLIC_ROUTES = ["/login"]

def main(page: ft.Page):
    page.padding = 0
    page.spacing = 0
    page.title = APP_NAME
    page.theme_mode = ft.ThemeMode.LIGHT
    page.vertical_alignment = ft.MainAxisAlignment.START

    monitor_active = {"value": False}

    def force_logout(reason: str):
        print(f"🔴 FORCE LOGOUT: {reason}")
        session = page.session.get(SESSION_KEY) if page.session.contains_key(SESSION_KEY) else None
        if session is not None:
            log_action(session.email, f"Session closed: {reason}")
        end_session(page)
        monitor_active["value"] = False
        page.open(ft.SnackBar(ft.Text("Your session has expired. Please log in again.")))
        page.go("/login")

    def start_session_monitor():
        if monitor_active["value"]:
            return
        monitor_active["value"] = True

        def session_monitor():
            print("🚀 Session monitor started")
            while monitor_active["value"]:
                time.sleep(SESSION_CHECK_INTERVAL)
                if not monitor_active["value"]:
                    break
                session = page.session.get(SESSION_KEY) if page.session.contains_key(SESSION_KEY) else None
                if session is None:
                    monitor_active["value"] = False
                    break
                if not session.is_active():
                    try:
                        force_logout("inactivity timeout")
                    except Exception as ex:
                        print(f"Session monitor error: {ex}")
                    break
            print("🛑 Session monitor ended")

        threading.Thread(target=session_monitor, daemon=True).start()

    def route_change(e):
        route = page.route or "/"
        page.clean()
        page.overlay.clear()

        if route in PUBLIC_ROUTES:
            monitor_active["value"] = False
            if get_session(page) is not None:
                page.go("/")
                return
            login_view(page)
            return

        session = get_session(page)
        if session is None:
            page.open(ft.SnackBar(ft.Text("Please log in to continue.")))
            page.go("/login")
            return

        session.refresh()
        start_session_monitor()

        if route in ADMIN_ROUTES:
            admin_view(page, route)
        else:
            page.go("/")

    page.on_route_change = route_change
    page.go(page.route or "/")

if __name__ == "__main__":
    init_tables()
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER,
        port=int(os.getenv("PORT", "8550"))
    )
