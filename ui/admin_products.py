"""
Products Management Tab for Admin Panel
"""
import flet as ft

from core.category_service import get_all_categories
from core.errors import FetchError
from core.logger import log_action
from core.product_service import get_all_products, create_product, update_product, delete_product
from core.references import resolve_name
from core.utils import show_snack, open_dialog
from models.product import ACTIVE, STATUSES
from ui.admin_constants import DESKTOP_COLUMNS, GRID_SPACING, GRID_RUN_SPACING, PRIMARY
from ui.admin_utils import close_dialog, format_currency, parse_price

def build_products_tab(page: ft.Page, api, session, is_desktop: bool):
    """
    Build the Products management tab

    Categories are loaded alongside the products for the category names
    and the category dropdown; if they fail to load, products still show.
    """
    categories_by_id = {}

    # ===================== CARD BUILDER =====================

    def build_product_card(product):
        status_color = "green" if product.is_active else "red"
        return ft.Card(
            content=ft.Container(
                content=ft.Row([
                    ft.Container(
                        width=60,
                        height=60,
                        bgcolor="grey200",
                        border_radius=8,
                        alignment=ft.alignment.center,
                        content=ft.Icon(ft.Icons.RESTAURANT, size=26, color="grey600")
                    ),
                    ft.Column([
                        ft.Row([
                            ft.Text(product.name, weight="bold", size=16, color="black", expand=True),
                            ft.PopupMenuButton(
                                icon=ft.Icons.MORE_VERT,
                                items=[
                                    ft.PopupMenuItem(
                                        text="Edit",
                                        icon=ft.Icons.EDIT,
                                        on_click=lambda e, p=product: show_product_dialog(p)
                                    ),
                                    ft.PopupMenuItem(
                                        text="Delete",
                                        icon=ft.Icons.DELETE,
                                        on_click=lambda e, p=product: confirm_delete_product(p)
                                    ),
                                ],
                                icon_size=20,
                                menu_position=ft.PopupMenuPosition.OVER,
                            )
                        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN, spacing=5),
                        ft.Text(f"Category: {resolve_name(product.category, categories_by_id)}", size=12, color="grey700"),
                        ft.Row([
                            ft.Text(format_currency(product.price), color="green", weight="bold"),
                            ft.Container(
                                content=ft.Text(product.status, color="white", size=11),
                                bgcolor=status_color,
                                padding=ft.padding.symmetric(horizontal=6, vertical=2),
                                border_radius=10
                            )
                        ], spacing=10)
                    ], spacing=4, expand=True),
                ], spacing=10, vertical_alignment=ft.CrossAxisAlignment.CENTER),
                padding=10,
                bgcolor="white",
                border_radius=12
            )
        )

    # ===================== GRID/LIST CONTAINERS =====================

    product_grid = ft.GridView(
        runs_count=DESKTOP_COLUMNS,
        max_extent=500,
        child_aspect_ratio=3.5,
        spacing=GRID_SPACING,
        run_spacing=GRID_RUN_SPACING,
        expand=True
    )
    product_list = ft.Column(spacing=10, scroll=ft.ScrollMode.AUTO, expand=True)
    container = product_grid if is_desktop else product_list
    error_text = ft.Text("", color="red700", visible=False)
    retry_btn = ft.TextButton("Retry", icon=ft.Icons.REFRESH, visible=False, on_click=lambda e: load_products())

    # ===================== LOAD DATA =====================

    def load_categories():
        try:
            categories_by_id.clear()
            categories_by_id.update({c.id: c for c in get_all_categories(api)})
        except FetchError as ex:
            print(f"Category load error: {ex.message}")

    def load_products():
        container.controls.clear()
        try:
            products = get_all_products(api)
        except FetchError as ex:
            error_text.value = f"Failed to load products: {ex.message}"
            error_text.visible = retry_btn.visible = True
            page.update()
            return

        error_text.visible = retry_btn.visible = False
        for product in products:
            container.controls.append(build_product_card(product))
        if not products:
            container.controls.append(ft.Text("No products yet.", color="grey"))
        page.update()

    # ===================== ADD / EDIT DIALOG =====================

    def show_product_dialog(product=None):
        name_field = ft.TextField(label="Product Name", value=product.name if product else "", width=300)
        price_field = ft.TextField(
            label="Price",
            value=f"{product.price:.2f}" if product else "",
            width=300,
            keyboard_type=ft.KeyboardType.NUMBER
        )
        category_dropdown = ft.Dropdown(
            label="Category",
            width=300,
            value=product.category_id if product else None,
            options=[ft.dropdown.Option(c.id, c.name) for c in categories_by_id.values()]
        )
        status_dropdown = ft.Dropdown(
            label="Status",
            width=300,
            value=product.status if product else ACTIVE,
            options=[ft.dropdown.Option(s, s.capitalize()) for s in STATUSES]
        )
        message = ft.Text("", color="red")

        def save_product(e):
            name = (name_field.value or "").strip()
            if not all([name, price_field.value, category_dropdown.value]):
                message.value = "❌ Please fill all required fields"
                page.update()
                return

            price = parse_price(price_field.value)
            if price is None:
                message.value = "❌ Price must be a number of 0 or more"
                page.update()
                return

            if product:
                success, msg = update_product(api, product.id, name, category_dropdown.value, price, status_dropdown.value)
            else:
                created, msg = create_product(api, name, category_dropdown.value, price, status_dropdown.value)
                success = created is not None

            if not success:
                message.value = f"❌ {msg}"
                page.update()
                return

            log_action(session.email, f"{'Updated' if product else 'Created'} product: {name} ({format_currency(price)})")
            close_dialog(page, dialog)
            load_products()
            show_snack(page, f"✅ {msg}")

        dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text("Edit Product" if product else "Add Product", size=18, weight="bold"),
            content=ft.Column([name_field, category_dropdown, price_field, status_dropdown, message], tight=True, spacing=10),
            actions=[
                ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dialog)),
                ft.ElevatedButton("Update" if product else "Create", on_click=save_product, bgcolor=PRIMARY, color="white")
            ]
        )
        open_dialog(page, dialog)

    # ===================== DELETE =====================

    def confirm_delete_product(product):
        def do_delete(e):
            success, msg = delete_product(api, product.id)
            close_dialog(page, dialog)
            if success:
                log_action(session.email, f"Deleted product: {product.name}")
                load_products()
                show_snack(page, f"✅ {msg}", ft.Colors.ORANGE)
            else:
                show_snack(page, f"❌ {msg}", ft.Colors.RED)

        dialog = ft.AlertDialog(
            title=ft.Text("Confirm Delete"),
            content=ft.Text(f"Are you sure you want to delete '{product.name}'?"),
            actions=[
                ft.TextButton("Cancel", on_click=lambda e: close_dialog(page, dialog)),
                ft.ElevatedButton("Delete", on_click=do_delete, style=ft.ButtonStyle(bgcolor="red", color="white"))
            ]
        )
        open_dialog(page, dialog)

    # ===================== BUILD TAB =====================

    load_categories()
    load_products()

    return ft.Column([
        ft.Container(
            content=ft.Row([
                ft.Text("Product Management", size=20, weight="bold", color='black'),
                ft.ElevatedButton(
                    "Add Product",
                    icon=ft.Icons.ADD,
                    on_click=lambda e: show_product_dialog(),
                    bgcolor=PRIMARY,
                    color="white"
                )
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            padding=10
        ),
        ft.Row([error_text, retry_btn]),
        ft.Container(content=container, expand=True, padding=10)
    ], expand=True, spacing=0)
