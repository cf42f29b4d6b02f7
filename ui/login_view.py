import flet as ft

from core.api_client import ApiClient
from core.auth_service import login
from core.config import APP_NAME
from core.logger import log_action
from core.session_manager import start_session
from core.utils import show_loading, hide_loading
from ui.admin_constants import PRIMARY
from ui.admin_utils import is_valid_email

# ===== BRAND COLORS =====
LIGHT_GRAY = "#E5E7EB"

def login_view(page: ft.Page):
    page.title = f"Login - {APP_NAME}"
    FORM_WIDTH = 350

    # ===== INPUT FIELDS =====
    email = ft.TextField(
        label="Email Address",
        hint_text="admin@example.com",
        width=FORM_WIDTH,
        border_radius=12,
        filled=True,
        bgcolor=LIGHT_GRAY,
        border_color="transparent",
        focused_border_color=PRIMARY,
        prefix_icon=ft.Icons.EMAIL_OUTLINED,
        text_size=14,
        autofocus=True
    )

    password = ft.TextField(
        label="Password",
        password=True,
        can_reveal_password=True,
        width=FORM_WIDTH,
        border_radius=12,
        filled=True,
        bgcolor=LIGHT_GRAY,
        border_color="transparent",
        focused_border_color=PRIMARY,
        prefix_icon=ft.Icons.LOCK_OUTLINE,
        text_size=14
    )

    message = ft.Text(value="", color="red", size=12, text_align=ft.TextAlign.CENTER)

    def handle_login(e):
        email_value = (email.value or "").strip()
        if not email_value or not password.value:
            message.value = "❌ Email and password are required."
            page.update()
            return
        if not is_valid_email(email_value):
            message.value = "❌ Invalid email format!"
            page.update()
            return

        login_btn.disabled = True
        message.value = ""
        show_loading(page, "Signing in...")

        api = ApiClient()
        try:
            session, msg = login(api, email_value, password.value)
        finally:
            api.close()
            hide_loading(page)
            login_btn.disabled = False

        if session is None:
            message.value = f"❌ {msg}"
            page.update()
            return

        start_session(page, session)
        log_action(session.email, "Logged in")
        password.value = ""
        page.go("/")

    password.on_submit = handle_login

    login_btn = ft.ElevatedButton(
        "Login",
        on_click=handle_login,
        width=FORM_WIDTH,
        height=48,
        bgcolor=PRIMARY,
        color="white"
    )

    page.clean()
    page.add(
        ft.Container(
            content=ft.Column([
                ft.Text(APP_NAME, size=28, weight="bold", color=PRIMARY),
                ft.Text("Sign in to manage the back office", size=13, color="grey700"),
                ft.Container(height=20),
                email,
                password,
                message,
                login_btn
            ], horizontal_alignment=ft.CrossAxisAlignment.CENTER, spacing=12),
            alignment=ft.alignment.center,
            expand=True,
            padding=20
        )
    )
    page.update()
