import flet as ft
from core.auth_service import get_identity
from core.profile_service import load_profile, save_profile, AVATAR_KEY, TEXT_FIELDS, FLAG_FIELDS
from core.utils import show_snack
from ui.header import header, avatar_control

BUTTON_BG = "#F4CE14"

FIELD_LABELS = {
    "firstName": "First Name",
    "lastName": "Last Name",
    "email": "Email",
    "phoneN": "Phone Number",
}
FLAG_LABELS = {
    "checkedOrder": "Order Statuses",
    "checkedPassword": "Password Changes",
    "checkedOffers": "Special Offers",
    "checkedNewsletter": "Newsletter",
}
KEYBOARDS = {
    "email": ft.KeyboardType.EMAIL,
    "phoneN": ft.KeyboardType.PHONE,
}


def profile_view(page: ft.Page, kv_store):
    page.title = "Profile - Little Lemon"

    identity = get_identity(kv_store)
    # Edited values live here until Save; Discard reloads from the store
    form = load_profile(kv_store, identity)

    text_fields = {
        field: ft.TextField(
            label=FIELD_LABELS[field],
            value=form[field],
            keyboard_type=KEYBOARDS.get(field, ft.KeyboardType.TEXT),
            on_change=lambda e, f=field: form.__setitem__(f, e.control.value),
            border_radius=8,
            dense=True,
        )
        for field in TEXT_FIELDS
    }
    checkboxes = {
        flag: ft.Checkbox(
            label=FLAG_LABELS[flag],
            value=form[flag],
            on_change=lambda e, f=flag: form.__setitem__(f, bool(e.control.value)),
        )
        for flag in FLAG_FIELDS
    }

    avatar_slot = ft.Container()

    def render_avatar():
        avatar_slot.content = avatar_control(form, size=100)

    def on_file_pick(e: ft.FilePickerResultEvent):
        if e.files:
            form[AVATAR_KEY] = e.files[0].path
            render_avatar()
            page.update()

    file_picker = ft.FilePicker(on_result=on_file_pick)
    page.overlay.append(file_picker)

    def pick_image(e):
        file_picker.pick_files(allow_multiple=False, file_type=ft.FilePickerFileType.IMAGE)

    def remove_image(e):
        form[AVATAR_KEY] = None
        render_avatar()
        page.update()

    def handle_save(e):
        ok, msg = save_profile(kv_store, {key: form[key] for key in [AVATAR_KEY] + TEXT_FIELDS + FLAG_FIELDS})
        show_snack(page, msg, ok)

    def handle_discard(e):
        form.update(load_profile(kv_store, identity))
        for field, control in text_fields.items():
            control.value = form[field]
        for flag, control in checkboxes.items():
            control.value = form[flag]
        render_avatar()
        show_snack(page, "Reverted to last saved settings.")

    def handle_logout(e):
        page.go("/logout")

    def action_button(label, on_click):
        return ft.ElevatedButton(
            label,
            on_click=on_click,
            style=ft.ButtonStyle(bgcolor=BUTTON_BG, color="black", shape=ft.RoundedRectangleBorder(radius=8)),
        )

    render_avatar()

    page.clean()
    page.add(
        ft.Column([
            header(page, kv_store),
            ft.Container(
                content=ft.Column([
                    ft.Text("Personal Information", size=22, weight="bold"),
                    ft.Text("Avatar", size=14, color="grey700"),
                    ft.Row([
                        avatar_slot,
                        action_button("Change", pick_image),
                        action_button("Remove", remove_image),
                    ], spacing=20),
                    *text_fields.values(),
                    ft.Text("Email Notifications", size=16, weight="bold"),
                    *checkboxes.values(),
                    ft.Row([
                        action_button("Save Changes", handle_save),
                        action_button("Discard Changes", handle_discard),
                        action_button("Logout", handle_logout),
                    ], alignment=ft.MainAxisAlignment.CENTER, wrap=True),
                    ft.TextButton("Back to menu", icon=ft.Icons.ARROW_BACK, on_click=lambda e: page.go("/home")),
                ], spacing=10, scroll=ft.ScrollMode.AUTO),
                padding=20,
                expand=True,
            ),
        ], expand=True, spacing=0)
    )
    page.update()
