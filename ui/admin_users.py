"""
Users Management Tab for Admin Panel
"""
import flet as ft

from core.errors import FetchError
from core.logger import log_action
from core.user_service import get_all_users, create_user, update_user, delete_user
from core.utils import show_snack, open_dialog
from ui.admin_constants import USER_CARD_MIN_HEIGHT, DESKTOP_COLUMNS, GRID_SPACING, GRID_RUN_SPACING, PRIMARY
from ui.admin_utils import is_valid_email, close_dialog

def build_users_tab(page: ft.Page, api, session, is_desktop: bool):
    """
    Build the Users management tab

    Args:
        page: Flet page object
        api: ApiClient bound to the admin session
        session: Current AdminSession
        is_desktop: True if desktop layout, False if mobile

    Returns:
        ft.Column: tab content
    """

    # ===================== CARD BUILDER =====================
    def build_user_card(user):
        """Build a single user card with 3-dot menu"""
        return ft.Card(
            content=ft.Container(
                content=ft.Column([
                    ft.Row([
                        ft.Text(user.name, weight="bold", size=16, color='black', expand=True),
                        ft.PopupMenuButton(
                            icon=ft.Icons.MORE_VERT,
                            items=[
                                ft.PopupMenuItem(
                                    text="Edit",
                                    icon=ft.Icons.EDIT,
                                    on_click=lambda e, u=user: show_user_dialog(u)
                                ),
                                ft.PopupMenuItem(
                                    text="Delete",
                                    icon=ft.Icons.DELETE,
                                    on_click=lambda e, u=user: confirm_delete_user(u)
                                ),
                            ],
                            icon_size=20,
                            menu_position=ft.PopupMenuPosition.OVER,
                        )
                    ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN, spacing=5),
                    ft.Text(user.email, size=12, color="grey700"),
                    ft.Text(user.mobile or "No mobile number", size=12, color="grey600")
                ], spacing=7),
                padding=10,
                bgcolor='white',
                border_radius=12,
                **({'height': USER_CARD_MIN_HEIGHT} if is_desktop else {})
            )
        )

    # ===================== GRID/LIST CONTAINERS =====================

    users_grid = ft.GridView(
        runs_count=DESKTOP_COLUMNS,
        max_extent=400,
        child_aspect_ratio=2.5,
        spacing=GRID_SPACING,
        run_spacing=GRID_RUN_SPACING,
        expand=True
    )
    users_list = ft.Column(spacing=10, scroll=ft.ScrollMode.AUTO, expand=True)
    container = users_grid if is_desktop else users_list
    error_text = ft.Text("", color="red700", visible=False)
    retry_btn = ft.TextButton("Retry", icon=ft.Icons.REFRESH, visible=False, on_click=lambda e: load_users())

    # ===================== LOAD DATA =====================

    def load_users():
        """Load users into grid/list"""
        container.controls.clear()
        try:
            users = get_all_users(api)
        except FetchError as ex:
            error_text.value = f"Failed to load users: {ex.message}"
            error_text.visible = retry_btn.visible = True
            page.update()
            return

        error_text.visible = retry_btn.visible = False
        for user in users:
            container.controls.append(build_user_card(user))
        if not users:
            container.controls.append(ft.Text("No users yet.", color="grey"))
        page.update()

    # ===================== CREATE / EDIT DIALOG =====================

    def show_user_dialog(user=None):
        """Create a user, or edit `user` when given"""
        name_field = ft.TextField(label="Name", value=user.name if user else "", width=300)
        email_field = ft.TextField(label="Email", value=user.email if user else "", width=300)
        mobile_field = ft.TextField(label="Mobile", value=user.mobile if user else "", width=300, keyboard_type=ft.KeyboardType.PHONE)
        message = ft.Text("", color="red")

        def save_user(e):
            name = (name_field.value or "").strip()
            email = (email_field.value or "").strip()
            mobile = (mobile_field.value or "").strip()

            if not name or not email:
                message.value = "❌ Name and email are required!"
                page.update()
                return
            if not is_valid_email(email):
                message.value = "❌ Invalid email format!"
                page.update()
                return

            if user:
                success, msg = update_user(api, user.id, name=name, email=email, mobile=mobile)
                action = f"Updated user: {email}"
            else:
                created, msg = create_user(api, name, email, mobile)
                success = created is not None
                action = f"Created user: {email}"

            if not success:
                message.value = f"❌ {msg}"
                page.update()
                return

            log_action(session.email, action)
            close_dialog(page, dialog)
            load_users()
            show_snack(page, f"✅ {msg}")

        dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text("Edit User" if user else "Add User", size=18, weight="bold"),
            content=ft.Column([name_field, email_field, mobile_field, message], tight=True, spacing=10),
            actions=[
                ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dialog)),
                ft.ElevatedButton("Update" if user else "Create", on_click=save_user, bgcolor=PRIMARY, color="white")
            ]
        )
        open_dialog(page, dialog)

    # ===================== DELETE USER =====================

    def confirm_delete_user(user):
        """Delete user with confirmation"""
        def do_delete(e):
            success, msg = delete_user(api, user.id)
            close_dialog(page, dialog)
            if success:
                log_action(session.email, f"Deleted user: {user.email}")
                load_users()
                show_snack(page, f"✅ {msg}", ft.Colors.ORANGE)
            else:
                show_snack(page, f"❌ {msg}", ft.Colors.RED)

        dialog = ft.AlertDialog(
            title=ft.Text("Confirm Delete"),
            content=ft.Text(f"Are you sure you want to delete user:\n'{user.name}' ({user.email})?"),
            actions=[
                ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dialog)),
                ft.ElevatedButton(
                    "Delete User",
                    on_click=do_delete,
                    style=ft.ButtonStyle(bgcolor="red", color="white")
                )
            ]
        )
        open_dialog(page, dialog)

    # ===================== BUILD TAB =====================

    load_users()

    return ft.Column([
        ft.Container(
            content=ft.Row([
                ft.Text("User Management", size=20, weight="bold", color='black'),
                ft.ElevatedButton(
                    "Add User",
                    icon=ft.Icons.PERSON_ADD,
                    on_click=lambda e: show_user_dialog(),
                    bgcolor=PRIMARY,
                    color="white"
                )
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            padding=10
        ),
        ft.Row([error_text, retry_btn], visible=True),
        ft.Container(content=container, expand=True, padding=10)
    ], expand=True, spacing=0)
