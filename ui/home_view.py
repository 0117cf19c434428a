import flet as ft
from core.menu_cache import CATEGORIES, image_url
from core.menu_filter import MenuFilterController
from core.menu_sync import sync_menu
from ui.header import header

BANNER_BG = "#FFCC00"
BANNER_IMAGE = "https://raw.githubusercontent.com/Meta-Mobile-Developer-PC/Working-With-Data-API/main/images/pasta.jpg"
CHIP_BG = "#E2DADA"
CHIP_SELECTED_BG = "lightgray"


def menu_item_card(item: dict):
    price = item.get("price")
    return ft.Container(
        content=ft.Row([
            ft.Column([
                ft.Text(item.get("name") or "", weight="bold", size=18),
                ft.Text(f"${float(price):.2f}" if price is not None else "", weight="bold", size=16, color="green"),
                ft.Text(item.get("description") or "", size=13),
            ], spacing=4, expand=True),
            ft.Image(
                src=image_url(item),
                width=80,
                height=80,
                fit=ft.ImageFit.COVER,
                border_radius=8,
                error_content=ft.Container(width=80, height=80, bgcolor="grey300", border_radius=8),
            ),
        ], spacing=10, vertical_alignment=ft.CrossAxisAlignment.CENTER),
        bgcolor="#F8F8F8",
        padding=15,
        border_radius=8,
        margin=ft.margin.only(bottom=10),
    )


def home_view(page: ft.Page, menu_cache, kv_store, startup: dict):
    """
    Menu screen.

    `startup` lives for the whole launch: it records that the menu sync was
    attempted (and its error, if any) and the filter chosen on earlier visits.
    """
    page.title = "Little Lemon"

    items_column = ft.Column(spacing=0, scroll=ft.ScrollMode.AUTO, expand=True)
    loading = ft.Container(content=ft.ProgressRing(), alignment=ft.alignment.center, expand=True)
    error_text = ft.Text("", color="red", size=16, text_align=ft.TextAlign.CENTER)
    body = ft.Container(content=loading, expand=True, padding=ft.padding.symmetric(horizontal=20))

    def show_items(items):
        items_column.controls = [menu_item_card(item) for item in items]
        if not items:
            items_column.controls.append(
                ft.Container(
                    content=ft.Text("No dishes match your filter.", size=14, color="grey", italic=True),
                    padding=20,
                    alignment=ft.alignment.center,
                )
            )
        body.content = items_column
        page.update()

    def show_error(message):
        error_text.value = message
        body.content = ft.Container(content=error_text, alignment=ft.alignment.center, expand=True)
        page.update()

    controller = MenuFilterController(
        menu_cache,
        on_result=show_items,
        on_error=show_error,
        selected_categories=startup.get("categories"),
        search_text=startup.get("search_text", ""),
    )

    def category_button(category):
        selected = controller.is_selected(category)
        return ft.ElevatedButton(
            category,
            on_click=lambda e, c=category: on_toggle(c),
            style=ft.ButtonStyle(
                padding=ft.padding.symmetric(horizontal=15, vertical=8),
                shape=ft.RoundedRectangleBorder(radius=5),
                bgcolor=CHIP_SELECTED_BG if selected else CHIP_BG,
                color="white" if selected else "black",
            ),
        )

    category_row = ft.Row(
        [category_button(c) for c in CATEGORIES],
        spacing=15,
        scroll=ft.ScrollMode.AUTO,
    )

    def on_toggle(category):
        controller.toggle_category(category)
        category_row.controls = [category_button(c) for c in CATEGORIES]
        page.update()

    search_field = ft.TextField(
        hint_text="Search for dishes...",
        value=controller.search_text,
        prefix_icon=ft.Icons.SEARCH,
        bgcolor="white",
        border_radius=10,
        text_size=16,
        on_change=lambda e: controller.on_search_input(e.control.value),
    )

    banner = ft.Container(
        content=ft.Column([
            ft.Row([
                ft.Column([
                    ft.Text("Welcome to Our Restaurant", size=22, weight="bold", color="#333333", width=200),
                    ft.Text("Find your favorite meals easily!", size=16, color="#666666"),
                ], spacing=4),
                ft.Image(src=BANNER_IMAGE, width=100, height=100, fit=ft.ImageFit.COVER),
            ], alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
            search_field,
        ], spacing=10),
        bgcolor=BANNER_BG,
        padding=20,
        border_radius=ft.border_radius.only(bottom_left=20, top_right=20),
    )

    page.clean()
    page.add(
        ft.Column([
            header(page, kv_store),
            banner,
            ft.Container(
                content=ft.Text("Order For Delivery !", size=25),
                padding=ft.padding.symmetric(horizontal=20),
            ),
            ft.Container(content=category_row, height=50, padding=ft.padding.symmetric(horizontal=20)),
            body,
        ], expand=True, spacing=10)
    )
    page.update()

    if startup.get("menu_synced"):
        if startup.get("menu_error"):
            show_error(startup["menu_error"])
        else:
            controller.refresh()
        return controller

    # one attempt per launch, whether it succeeds or not
    items, error = sync_menu(menu_cache)
    startup["menu_synced"] = True
    startup["menu_error"] = error
    controller.show_startup_menu(items, error)

    return controller
