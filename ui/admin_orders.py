"""
Create Order Tab for Admin Panel

A form over OrderComposer: pick a user, add products, adjust quantities,
then submit. The draft lives only in the composer until the order is
created.
"""
import threading

import flet as ft

from core.config import SUCCESS_MESSAGE_SECONDS
from core.errors import ComposerError, FetchError
from core.logger import log_action
from core.order_composer import OrderComposer, ComposerState, QUANTITY, PRODUCT_ID
from core.order_form_loader import load_order_form
from core.order_service import order_gateway
from core.utils import open_dialog
from ui.admin_constants import PRIMARY
from ui.admin_utils import close_dialog, format_currency

def build_orders_tab(page: ft.Page, api, session, is_desktop: bool):
    """
    Build the Create Order tab

    Args:
        page: Flet page object
        api: ApiClient bound to the admin session
        session: Current AdminSession
        is_desktop: True if desktop layout, False if mobile

    Returns:
        ft.Container: tab content
    """
    composer = {"value": None}
    success_timer = {"value": None}

    error_banner = ft.Container(
        content=ft.Text("", color="red800"),
        bgcolor="red50",
        border=ft.border.all(1, "red300"),
        border_radius=6,
        padding=10,
        visible=False
    )
    success_banner = ft.Container(
        content=ft.Text("", color="green800"),
        bgcolor="green50",
        border=ft.border.all(1, "green300"),
        border_radius=6,
        padding=10,
        visible=False
    )
    retry_btn = ft.ElevatedButton("Retry", icon=ft.Icons.REFRESH, visible=False, on_click=lambda e: load_form())

    user_dropdown = ft.Dropdown(label="Select User", hint_text="Choose a user...", expand=True)
    items_column = ft.Column(spacing=10)
    total_text = ft.Text(format_currency(0), size=24, weight="bold", color=PRIMARY)
    submit_btn = ft.ElevatedButton("Create Order", bgcolor=PRIMARY, color="white", height=48, expand=True)
    add_btn = ft.ElevatedButton("Add Product", icon=ft.Icons.ADD, bgcolor="green600", color="white")
    clear_btn = ft.TextButton("Clear", icon=ft.Icons.CLEAR_ALL)
    form = ft.Column(spacing=15, visible=False)

    # ===================== MESSAGES =====================

    def show_error(msg):
        error_banner.content.value = msg
        error_banner.visible = bool(msg)

    def cancel_success_timer():
        timer = success_timer["value"]
        if timer is not None:
            timer.cancel()
            success_timer["value"] = None
        success_banner.visible = False

    def show_success(msg):
        cancel_success_timer()
        success_banner.content.value = msg
        success_banner.visible = True

        def dismiss():
            success_banner.visible = False
            success_timer["value"] = None
            page.update()

        timer = threading.Timer(SUCCESS_MESSAGE_SECONDS, dismiss)
        timer.daemon = True
        success_timer["value"] = timer
        timer.start()

    def run(action):
        """Apply a draft change; any change hides the success message"""
        cancel_success_timer()
        try:
            action()
            show_error(None)
        except ComposerError as ex:
            show_error(ex.message)
        render()

    # ===================== RENDER =====================

    def build_item_row(index, item):
        draft = composer["value"]
        product_options = [
            ft.dropdown.Option(p.id, f"{p.name} - {format_currency(p.price)}")
            for p in draft.products
        ]
        quantity_field = ft.TextField(
            label="Quantity",
            value=str(item.quantity),
            width=110,
            keyboard_type=ft.KeyboardType.NUMBER,
        )
        # applied on blur/enter so typing is not interrupted by re-rendering
        quantity_field.on_blur = lambda e, i=index: run(lambda: draft.update_line_item(i, QUANTITY, e.control.value))
        quantity_field.on_submit = quantity_field.on_blur
        return ft.Container(
            content=ft.ResponsiveRow([
                ft.Dropdown(
                    label="Product",
                    value=item.product_id,
                    options=product_options,
                    on_change=lambda e, i=index: run(lambda: draft.update_line_item(i, PRODUCT_ID, e.control.value)),
                    col={"xs": 12, "md": 5}
                ),
                ft.Container(content=quantity_field, col={"xs": 6, "md": 2}),
                ft.Container(
                    content=ft.Column([
                        ft.Text("Item Total", size=11, color="grey700"),
                        ft.Text(format_currency(draft.line_total(index)), weight="bold")
                    ], spacing=2),
                    col={"xs": 6, "md": 3}
                ),
                ft.Container(
                    content=ft.ElevatedButton(
                        "Remove",
                        icon=ft.Icons.DELETE,
                        bgcolor="red600",
                        color="white",
                        on_click=lambda e, i=index: run(lambda: draft.remove_line_item(i))
                    ),
                    col={"xs": 12, "md": 2}
                ),
            ], vertical_alignment=ft.CrossAxisAlignment.CENTER),
            border=ft.border.all(1, "grey300"),
            border_radius=8,
            padding=10
        )

    def render():
        draft = composer["value"]
        if draft is None:
            page.update()
            return

        user_dropdown.value = draft.user_id or None
        items_column.controls = [build_item_row(i, item) for i, item in enumerate(draft.items)]
        if not draft.items:
            items_column.controls = [ft.Text('No products added. Click "Add Product" to start.', size=12, color="grey")]

        submitting = draft.state == ComposerState.SUBMITTING
        total_text.value = format_currency(draft.compute_total())
        submit_btn.text = "Creating Order..." if submitting else "Create Order"
        submit_btn.disabled = submitting or not draft.items
        add_btn.disabled = submitting
        clear_btn.disabled = submitting or draft.state == ComposerState.EMPTY
        page.update()

    # ===================== ADD PRODUCT DIALOG =====================

    def show_add_product_dialog(e=None):
        draft = composer["value"]
        available = draft.available_products()
        message = ft.Text("", color="red", size=12)
        preview = ft.Text("", size=12, color="grey700")

        product_dropdown = ft.Dropdown(
            label="Choose a product",
            hint_text="Select a product...",
            width=300,
            options=[ft.dropdown.Option(p.id, p.name) for p in available]
        )

        def on_select(ev):
            product = draft.product(product_dropdown.value)
            preview.value = f"Price: {format_currency(product.price)}" if product else ""
            confirm_btn.disabled = not product_dropdown.value
            page.update()

        product_dropdown.on_change = on_select

        def add_to_order(ev):
            cancel_success_timer()
            try:
                draft.add_line_item(product_dropdown.value)
            except ComposerError as ex:
                message.value = f"❌ {ex.message}"
                page.update()
                return
            show_error(None)
            close_dialog(page, dialog)
            render()

        confirm_btn = ft.ElevatedButton("Add to Order", on_click=add_to_order, disabled=True, bgcolor="green600", color="white")

        if available:
            content = ft.Column([product_dropdown, preview, message], tight=True, spacing=10)
        else:
            content = ft.Text("No active products available", size=12, color="grey")

        dialog = ft.AlertDialog(
            modal=True,
            title=ft.Text("Select Product to Add", size=16, weight="bold"),
            content=content,
            actions=[
                ft.TextButton("Cancel", on_click=lambda ev: close_dialog(page, dialog)),
                confirm_btn
            ]
        )
        open_dialog(page, dialog)

    # ===================== SUBMIT =====================

    def submit_order(e):
        draft = composer["value"]
        cancel_success_timer()
        show_error(None)
        submit_btn.text = "Creating Order..."
        submit_btn.disabled = True
        page.update()

        user = draft.user(draft.user_id)
        total = draft.compute_total()
        try:
            order = draft.submit()
        except ComposerError as ex:
            show_error(ex.message)
            render()
            return
        except Exception as ex:
            print(f"Order submit error: {ex!r}")
            show_error(draft.last_error or "Failed to create order")
            render()
            return

        customer = user.label if user else "unknown user"
        log_action(session.email, f"Created order #{order.id} for {customer} ({format_currency(total)})")
        show_success("Order created successfully!")
        render()

    def clear_draft(e):
        run(lambda: composer["value"].cancel())

    user_dropdown.on_change = lambda e: run(lambda: composer["value"].select_user(e.control.value))
    add_btn.on_click = show_add_product_dialog
    submit_btn.on_click = submit_order
    clear_btn.on_click = clear_draft

    # ===================== LOAD DATA =====================

    def load_form():
        form.visible = False
        retry_btn.visible = False
        show_error(None)
        page.update()

        try:
            users, products = load_order_form(api)
        except FetchError as ex:
            show_error(ex.message)
            retry_btn.visible = True
            page.update()
            return

        composer["value"] = OrderComposer(products, users, order_gateway(api))
        user_dropdown.options = [ft.dropdown.Option(u.id, u.label) for u in users]
        form.visible = True
        render()

    form.controls = [
        ft.Row([user_dropdown]),
        ft.Row([
            ft.Text("Order Items", size=16, weight="bold"),
            ft.Row([clear_btn, add_btn], spacing=5)
        ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
        items_column,
        ft.Container(
            content=ft.Row([
                ft.Text("Total Amount:", size=16, weight="bold", color="grey800"),
                total_text
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            bgcolor="grey100",
            border_radius=8,
            padding=15
        ),
        ft.Row([submit_btn])
    ]

    load_form()

    return ft.Container(
        content=ft.Column([
            ft.Text("Create Order", size=24, weight="bold", color=PRIMARY),
            error_banner,
            retry_btn,
            success_banner,
            ft.Container(content=form, bgcolor="white", border_radius=10, padding=20)
        ], spacing=12, scroll=ft.ScrollMode.AUTO, expand=True),
        padding=15,
        expand=True
    )
