# core/utils.py
import flet as ft


def show_snack(page: ft.Page, text: str, ok: bool = True):
    """Show a short confirmation or error bar at the bottom of the page."""
    page.snack_bar = ft.SnackBar(
        ft.Text(text, color="white"),
        bgcolor=ft.Colors.GREEN if ok else ft.Colors.RED,
    )
    page.snack_bar.open = True
    page.update()
