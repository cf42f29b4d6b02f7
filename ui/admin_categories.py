"""
Categories Management Tab for Admin Panel
"""
import flet as ft

from core.category_service import get_all_categories, create_category, update_category, delete_category
from core.errors import FetchError
from core.logger import log_action
from core.utils import show_snack, open_dialog
from ui.admin_constants import PRIMARY
from ui.admin_utils import close_dialog

def build_categories_tab(page: ft.Page, api, session, is_desktop: bool):
    """Build the Categories management tab (table of name / description / actions)"""

    table = ft.DataTable(
        columns=[
            ft.DataColumn(ft.Text("Name")),
            ft.DataColumn(ft.Text("Description")),
            ft.DataColumn(ft.Text("Actions")),
        ],
        bgcolor="white",
        border_radius=8,
        expand=True
    )
    error_text = ft.Text("", color="red700", visible=False)
    retry_btn = ft.TextButton("Retry", icon=ft.Icons.REFRESH, visible=False, on_click=lambda e: load_categories())

    def build_row(category):
        return ft.DataRow(cells=[
            ft.DataCell(ft.Text(category.name, weight="bold")),
            ft.DataCell(ft.Text(category.description or "-", color="grey700")),
            ft.DataCell(ft.Row([
                ft.IconButton(ft.Icons.EDIT, tooltip="Edit", icon_color="blue600",
                              on_click=lambda e, c=category: show_category_dialog(c)),
                ft.IconButton(ft.Icons.DELETE, tooltip="Delete", icon_color="red600",
                              on_click=lambda e, c=category: confirm_delete_category(c)),
            ], spacing=0)),
        ])

    # ===================== LOAD DATA =====================

    def load_categories():
        try:
            categories = get_all_categories(api)
        except FetchError as ex:
            error_text.value = f"Failed to load categories: {ex.message}"
            error_text.visible = retry_btn.visible = True
            page.update()
            return

        error_text.visible = retry_btn.visible = False
        table.rows = [build_row(c) for c in categories]
        page.update()

    # ===================== CREATE / EDIT DIALOG =====================

    def show_category_dialog(category=None):
        name_field = ft.TextField(label="Name", value=category.name if category else "", width=300)
        description_field = ft.TextField(
            label="Description",
            value=category.description if category else "",
            width=300,
            multiline=True,
            min_lines=2
        )
        message = ft.Text("", color="red")

        def save_category(e):
            name = (name_field.value or "").strip()
            description = (description_field.value or "").strip()
            if not name:
                message.value = "❌ Name is required!"
                page.update()
                return

            if category:
                success, msg = update_category(api, category.id, name, description)
            else:
                created, msg = create_category(api, name, description)
                success = created is not None

            if not success:
                message.value = f"❌ {msg}"
                page.update()
                return

            log_action(session.email, f"{'Updated' if category else 'Created'} category: {name}")
            close_dialog(page, dialog)
            load_categories()
            show_snack(page, f"✅ {msg}")

        dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text("Edit Category" if category else "Add Category", size=18, weight="bold"),
            content=ft.Column([name_field, description_field, message], tight=True, spacing=10),
            actions=[
                ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dialog)),
                ft.ElevatedButton("Update" if category else "Create", on_click=save_category, bgcolor=PRIMARY, color="white")
            ]
        )
        open_dialog(page, dialog)

    # ===================== DELETE =====================

    def confirm_delete_category(category):
        def do_delete(e):
            success, msg = delete_category(api, category.id)
            close_dialog(page, dialog)
            if success:
                log_action(session.email, f"Deleted category: {category.name}")
                load_categories()
                show_snack(page, f"✅ {msg}", ft.Colors.ORANGE)
            else:
                show_snack(page, f"❌ {msg}", ft.Colors.RED)

        dialog = ft.AlertDialog(
            title=ft.Text("Confirm Delete"),
            content=ft.Text(f"Are you sure you want to delete the category '{category.name}'?"),
            actions=[
                ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dialog)),
                ft.ElevatedButton("Delete", on_click=do_delete, style=ft.ButtonStyle(bgcolor="red", color="white"))
            ]
        )
        open_dialog(page, dialog)

    load_categories()

    return ft.Column([
        ft.Container(
            content=ft.Row([
                ft.Text("Category Management", size=20, weight="bold", color='black'),
                ft.ElevatedButton(
                    "Add Category",
                    icon=ft.Icons.ADD,
                    on_click=lambda e: show_category_dialog(),
                    bgcolor=PRIMARY,
                    color="white"
                )
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            padding=10
        ),
        ft.Row([error_text, retry_btn]),
        ft.Container(
            content=ft.Column([ft.Row([table], scroll=ft.ScrollMode.AUTO)], scroll=ft.ScrollMode.AUTO),
            expand=True,
            padding=10
        )
    ], expand=True, spacing=0)
