ROUTE_CONFIG = {
    "get": [
        {"path": "/users", "to": "users#index"},
        {"pattern": r"\A/users/\d+\Z", "to": "users#show"},
        {"path": "/widgets", "to": "widgets#index"},
        {"pattern": r"\A/widgets/[\w-]+\Z", "to": "widgets#show"},
    ],
    "post": [
        {"path": "/users", "to": "users#create"},
        {"path": "/widgets", "to": "widgets#create"},
    ],
    "put": [
        {"pattern": r"\A/users/\d+\Z", "to": "users#update"},
    ],
    "delete": [
        {"pattern": r"\A/users/\d+\Z", "to": "users#destroy"},
    ],
}
