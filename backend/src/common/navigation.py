"""
Route identifiers understood by the Billed front-end router.

The core never navigates by itself: it hands one of these values to the
``on_navigate`` callback supplied by the caller.
"""

ROUTES_PATH: dict[str, str] = {
    "Login": "",
    "Bills": "#employee/bills",
    "NewBill": "#employee/bill/new",
    "Dashboard": "#admin/dashboard",
}
