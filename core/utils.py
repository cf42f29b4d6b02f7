import flet as ft

LOADING_KEY = "_loading_dialog"

def show_loading(page: ft.Page, text: str = "Please wait..."):
    """Show a small modal loading indicator (one per browser session)."""
    loading = page.session.get(LOADING_KEY) if page.session.contains_key(LOADING_KEY) else None
    if loading is None:
        loading = ft.AlertDialog(
            modal=True,
            content=ft.Row([ft.ProgressRing(), ft.Text(text)], alignment=ft.MainAxisAlignment.CENTER),
            actions=[]
        )
        page.session.set(LOADING_KEY, loading)
    loading.content.controls[1].value = text
    if loading not in page.overlay:
        page.overlay.append(loading)
    loading.open = True
    page.update()

def hide_loading(page: ft.Page):
    """Hide loading indicator."""
    if page.session.contains_key(LOADING_KEY):
        loading = page.session.get(LOADING_KEY)
        if loading:
            loading.open = False
            page.update()

def show_snack(page: ft.Page, text: str, color=ft.Colors.GREEN):
    """Show a short message at the bottom of the page."""
    page.open(ft.SnackBar(ft.Text(text), bgcolor=color))
    page.update()

def open_dialog(page: ft.Page, dialog: ft.AlertDialog):
    page.overlay.append(dialog)
    dialog.open = True
    page.update()
