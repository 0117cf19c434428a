# core/menu_api.py
import requests
from core.config import MENU_API_URL, MENU_FETCH_TIMEOUT
from core.errors import FormatError, NetworkError


def fetch_remote_menu(url: str = MENU_API_URL, http=None, timeout: float = MENU_FETCH_TIMEOUT):
    """
    Download the menu listing once.

    Args:
        url: JSON endpoint returning {"menu": [...]}
        http: object with a requests-style get(); defaults to the requests module
        timeout: seconds before the request is abandoned

    Returns:
        list of menu records (dicts with name, price, description, image, category)

    Raises:
        NetworkError: transport failure or non-success HTTP status
        FormatError: body is not JSON or has no `menu` list of objects
    """
    http = http or requests
    print(f"🌐 Fetching menu from {url}")

    try:
        response = http.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise NetworkError(f"Request failed: {e}") from e

    if not response.ok:
        raise NetworkError(f"HTTP Error: {response.status_code}", status_code=response.status_code)

    try:
        data = response.json()
    except ValueError as e:
        raise FormatError("Response is not valid JSON") from e

    menu = data.get("menu") if isinstance(data, dict) else None
    if not isinstance(menu, list):
        raise FormatError("Invalid menu data format")
    if not all(isinstance(item, dict) for item in menu):
        raise FormatError("Invalid menu data format: every entry must be an object")

    print(f"✅ Received {len(menu)} menu items")
    return menu
