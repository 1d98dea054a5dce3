"""Render a Refract data structure as MSON — zero config, zero deps."""

from refract_mson import render

user = {
    "element": "dataStructure",
    "meta": {"title": "User"},
    "content": {
        "element": "object",
        "content": [
            {
                "element": "member",
                "meta": {"description": "Unique identifier"},
                "attributes": {"typeAttributes": ["required"]},
                "content": {
                    "key": {"element": "string", "content": "id"},
                    "value": {"element": "number", "content": 1},
                },
            },
            {"element": "ref", "content": {"href": "Timestamps"}},
        ],
    },
}

print(render(user), end="")
