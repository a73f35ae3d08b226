"""Bundled demo configuration served by the default app and used in tests."""

DEMO_CONFIG = {
    "reels": {
        "seasons": {
            "cards": {
                0: "Spring collection",
                1: "Summer sale",
                2: "Autumn deals",
                3: "Winter warmers",
            },
            "aliases": {"_default": 1, "summer": 1, "winter": 3},
        },
    },
    "slots": {
        "headline": {
            "keys": ["h", "headline"],
            "reel": {
                "cards": {
                    0: "Welcome back",
                    1: "Fresh arrivals",
                    2: "Last chance",
                },
            },
        },
        "banner": {
            "keys": ["b", "banner"],
            "reel": "seasons",
            "undefined_card": "default_card",
        },
        "user": {
            "keys": ["uid"],
            "reel": {
                "cards": {0: "guest", 1: "Alice", 2: "Bob", 7: "Carol"},
                "aliases": {"admin": 7},
            },
        },
        "greeting": {
            "keys": ["g"],
            "reel": {
                "cards": {
                    0: "Hello {user}, {banner} is on!",
                    1: "Good to see you {user}. Today: {banner}.",
                },
            },
            "nested": ["user", "banner"],
        },
        "footer": {
            "keys": ["f"],
            "reel": {"cards": {0: "Prices in {currency}"}},
        },
    },
}
