from smsedgeapi.exceptions import UnknownEndpointError
from smsedgeapi.models.endpoint import Endpoint
from smsedgeapi.validator import RuleSpec, parse_rules

ID_RULE = "numeric|digits_between:1,32"

_CATALOG: list[tuple[str, str, str, dict[str, RuleSpec]]] = [
    # references
    ("get_functions", "references/functions/", "All available API functions", {}),
    ("get_http_statuses", "references/statuses/", "All HTTP response status codes", {}),
    ("get_countries", "references/countries/", "List of countries", {}),
    # sms
    (
        "send_single_sms",
        "sms/send-single/",
        "Send a single SMS message",
        {
            "from": "required|string",
            "to": "required|numeric|digits_between:7,64",
            "text": "required|string",
            "name": "string",
            "email": "email",
            "country_id": ID_RULE,
            "reference": "string",
            "shorten_url": "boolean",
            "list_id": ID_RULE,
            "transactional": "boolean",
            "preferred_route_id": ID_RULE,
            "delay": ID_RULE,
        },
    ),
    (
        "send_list",
        "sms/send-list/",
        "Send SMS messages to all good numbers in a list",
        {
            "list_id": f"required|{ID_RULE}",
            "from": "required|string",
            "text": "required|string",
            "shorten_url": "boolean",
            "preferred_route_id": ID_RULE,
        },
    ),
    ("get_sms_info", "sms/get/", "Information about sent SMS messages", {"ids": "required|string"}),
    # lists of numbers
    ("create_list", "lists/create/", "Create a new list", {"name": "required|string"}),
    ("delete_list", "lists/delete/", "Delete an existing list", {"id": "required|numeric"}),
    (
        "get_list_info",
        "lists/info/",
        "List info, sending stats and numbers segmentation",
        {"id": "required|numeric"},
    ),
    ("get_all_lists", "lists/getall/", "All lists created by the user", {}),
    # phone numbers
    (
        "create_number",
        "numbers/create/",
        "Add a contact to a list",
        {
            "number": "required|string",
            "list_id": f"required|{ID_RULE}",
            "country_id": ID_RULE,
            "name": "string",
            "email": "email",
        },
    ),
    ("delete_number", "numbers/delete/", "Delete contacts from a list", {"ids": "required|string"}),
    (
        "get_numbers",
        "numbers/get/",
        "Extended information about numbers",
        {"list_id": ID_RULE, "ids": "string", "limit": ID_RULE, "offset": ID_RULE},
    ),
    ("get_unsubscribers", "numbers/unsubscribers/", "Unsubscribed numbers", {}),
    # routes
    ("get_routes", "routes/getall/", "Available routes with prices per country", {}),
    # auxiliary tools
    (
        "number_simple_verify",
        "verify/number-simple/",
        "Logical verification of a number",
        {"number": "required|string", "country_id": ID_RULE},
    ),
    (
        "number_hlr_verify",
        "verify/number-hlr/",
        "Verify a number against the Home Location Register",
        {"number": "required|string", "country_id": ID_RULE},
    ),
    ("text_analyzing", "text/analyze/", "Check a text before sending", {"text": "required|string"}),
    # reports
    (
        "get_sending_report",
        "reports/sending/",
        "Report about the SMS sending process",
        {
            "status": "string",
            "date_from": "date",
            "date_to": "date",
            "limit": ID_RULE,
            "offset": ID_RULE,
        },
    ),
    (
        "get_sending_stats",
        "reports/stats/",
        "Statistics about SMS sending",
        {
            "country_id": f"required|{ID_RULE}",
            "date_from": "required|date",
            "date_to": "required|date",
            "route_id": ID_RULE,
        },
    ),
    # user
    ("get_user_details", "user/details/", "API user details", {}),
]

ENDPOINTS: dict[str, Endpoint] = {
    name: Endpoint(name=name, path=path, description=description, rules=parse_rules(rules))
    for name, path, description, rules in _CATALOG
}


def get_endpoint(name: str) -> Endpoint:
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise UnknownEndpointError(f"Unknown endpoint: {name}") from None
