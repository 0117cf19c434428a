import flet as ft
from core.auth_service import login
from ui.header import header

MOBILE_WIDTH = 350
LIGHT_GRAY = "#D9D9D9"
YELLOW = "#F4CE14"


def login_view(page: ft.Page, kv_store):
    page.title = "Login - Little Lemon"

    first_name = ft.TextField(
        label="First Name",
        hint_text="Enter your first name",
        width=MOBILE_WIDTH,
        border_radius=12,
        filled=True,
        bgcolor=LIGHT_GRAY,
        prefix_icon=ft.Icons.PERSON_OUTLINE,
    )
    email = ft.TextField(
        label="Email",
        hint_text="Enter your email",
        width=MOBILE_WIDTH,
        border_radius=12,
        filled=True,
        bgcolor=LIGHT_GRAY,
        keyboard_type=ft.KeyboardType.EMAIL,
        prefix_icon=ft.Icons.EMAIL_OUTLINED,
    )
    form_message = ft.Text("", color="red", size=12)

    def handle_next(e):
        ok, errors = login(kv_store, first_name.value or "", email.value or "")
        first_name.error_text = errors.get("first_name")
        email.error_text = errors.get("email")
        form_message.value = errors.get("form", "")
        if ok:
            page.go("/home")
            return
        page.update()

    page.clean()
    page.add(
        ft.Column([
            header(page, kv_store, show_avatar=False),
            ft.Container(
                content=ft.Column([
                    ft.Text("Let us get to know you", size=28, weight="bold"),
                    ft.Container(height=60),
                    first_name,
                    ft.Container(height=20),
                    email,
                    form_message,
                ], horizontal_alignment=ft.CrossAxisAlignment.CENTER),
                padding=20,
                expand=True,
            ),
            ft.Container(
                content=ft.ElevatedButton(
                    "Next",
                    width=MOBILE_WIDTH,
                    on_click=handle_next,
                    style=ft.ButtonStyle(bgcolor=YELLOW, color="black", shape=ft.RoundedRectangleBorder(radius=8)),
                ),
                padding=20,
                alignment=ft.alignment.center,
            ),
        ], expand=True, spacing=0)
    )
    page.update()
