import flet as ft
from core.profile_service import load_profile, initials, AVATAR_KEY

HEADER_BG = "#EDEDED"
LEMON_GREEN = "#495E57"


def avatar_control(profile: dict, size: int = 44, on_click=None):
    """Avatar image, or the user's initials when no image is set."""
    image = profile.get(AVATAR_KEY)
    if image:
        content = ft.Image(src=image, width=size, height=size, fit=ft.ImageFit.COVER, border_radius=size // 2)
    else:
        content = ft.Text(
            initials(profile.get("firstName", ""), profile.get("lastName", "")),
            size=size // 2.5,
            weight="bold",
            color="white",
        )
    return ft.Container(
        content=content,
        width=size,
        height=size,
        border_radius=size // 2,
        bgcolor=LEMON_GREEN,
        alignment=ft.alignment.center,
        on_click=on_click,
    )


def header(page: ft.Page, kv_store, show_avatar: bool = True):
    profile = load_profile(kv_store)
    controls = [
        ft.Image(src="assets/logo.png", height=40, fit=ft.ImageFit.CONTAIN),
    ]
    if show_avatar:
        controls.append(avatar_control(profile, on_click=lambda e: page.go("/profile")))

    return ft.Container(
        content=ft.Row(controls, alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
        bgcolor=HEADER_BG,
        padding=ft.padding.symmetric(horizontal=16, vertical=8),
        height=60,
    )
