"""Example records shown on a fresh site."""

from __future__ import annotations

_IMG = "https://images.unsplash.com/{}?auto=format&fit=crop&w={}&q=80"

SEED_PROJECTS = [
    {
        "name": "Consultation",
        "description": "Personalized guidance to prepare listings for market success.",
        "image": _IMG.format("photo-1521791136064-7986c2920216", 800),
    },
    {
        "name": "Design",
        "description": "Interior refresh focused on light, flow, and clean staging.",
        "image": _IMG.format("photo-1505691938895-1758d7feb511", 800),
    },
    {
        "name": "Marketing & Design",
        "description": "Campaigns pairing lifestyle photography with targeted reach.",
        "image": _IMG.format("photo-1505692069463-5e3405e2e7ee", 800),
    },
    {
        "name": "Consultation & Marketing",
        "description": "Listing launch plans with pricing strategy and media assets.",
        "image": _IMG.format("photo-1570129476761-5c0f5be0c5d8", 800),
    },
    {
        "name": "Consultation",
        "description": "Local market insights with renovation ROI snapshots.",
        "image": _IMG.format("photo-1560518883-ce09059eeffa", 800),
    },
]

SEED_CLIENTS = [
    {
        "name": "Rowhan Smith",
        "designation": "Founder",
        "description": "Process felt simple from consult to closing.",
        "image": _IMG.format("photo-1524504388940-b1c1722653e1", 400),
    },
    {
        "name": "Shipra Kayak",
        "designation": "Designer",
        "description": "Design team staged our home beautifully.",
        "image": _IMG.format("photo-1544723795-3fb6469f5b39", 400),
    },
    {
        "name": "John Lepore",
        "designation": "Marketing Lead",
        "description": "Marketing pushed traffic the first weekend.",
        "image": _IMG.format("photo-1521572267360-ee0c2909d518", 400),
    },
    {
        "name": "Marry Freeman",
        "designation": "Homeowner",
        "description": "Transparent updates and quick responses.",
        "image": _IMG.format("photo-1524504388940-b1c1722653e1", 400),
    },
    {
        "name": "Lucy",
        "designation": "Investor",
        "description": "Great insight on renovation budgets.",
        "image": _IMG.format("photo-1524504388940-b1c1722653e1", 400),
    },
]

# Degraded mode gets a smaller, fixed-id subset; contacts/subscribers start empty.
FALLBACK_PROJECTS = [
    {"_id": "fallback-1", **SEED_PROJECTS[0]},
    {"_id": "fallback-2", **SEED_PROJECTS[1]},
]

FALLBACK_CLIENTS = [
    {"_id": "fallback-c1", **SEED_CLIENTS[0]},
]
