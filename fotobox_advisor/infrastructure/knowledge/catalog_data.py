from __future__ import annotations

from typing import Any

PRINT_ONLY = {"field": "mode", "equals": "digital_and_print"}

_PRINT_FACTS = (
    "Nach jeder Fotosession kann jedes Bild bis zu fünfmal gedruckt werden, sodass bei Gruppenfotos "
    "jede Person ein eigenes Exemplar erhält. Ein Print dauert nur etwa 10 Sekunden."
)

DEFAULT_CATALOG: dict[str, Any] = {
    "brand": "Fobi Fotobox",
    "assistant_name": "Dennis",
    "steps": [
        {
            "id": "privacy",
            "kind": "consent",
            "title": "Moin! Ich bin dein Fotobox-Berater von Fobi Fotobox.",
            "description": (
                "Bitte gib hier keine persönlichen Daten ein, wie vollständige Namen, Telefonnummern oder "
                "E-Mail-Adressen. Mit dem Start erklärst du dich damit einverstanden, dass deine Angaben "
                "ausschließlich zur Beratung und Preisfindung verarbeitet werden."
            ),
            "required": True,
            "options": [
                {"label": "Ich stimme den Datenschutzbedingungen zu und starte die Beratung", "value": "accept"}
            ],
        },
        {
            "id": "welcome",
            "kind": "info",
            "title": "Moin! Willkommen bei Fobi Fotobox",
            "description": "Ich bin Dennis, dein Berater. Hier ist unser Grundpaket:",
            "options": [{"label": "Weiter", "value": "continue"}],
            "sections": [
                {
                    "title": "Fotobox",
                    "items": [
                        "Spiegelreflexkamera, Studioblitz und 15\" Touchscreen",
                        "Digitale Fotoflat mit Videovorschau",
                        "GIF- und Boomerang-Videos",
                        "Bilderversand an der Fotobox (QR-Code)",
                    ],
                },
                {
                    "title": "Service",
                    "items": [
                        "Alle Fotos/Videos mit Overlay",
                        "Online-Galerie (mit Passwort)",
                        "Lieferung, Aufbau und Abbau (20 km inkl., 80 km möglich)",
                    ],
                },
                {
                    "title": "Zubehörpaket",
                    "items": [
                        "Ein kleines Zubehörpaket (Requisiten, Hintergrund oder individuelle Layout-Gestaltung) "
                        "ist inklusive."
                    ],
                },
            ],
        },
        {
            "id": "mode",
            "kind": "mode",
            "title": "Wie möchtest du starten?",
            "description": "Wähle den Modus: rein digital oder mit Sofortdrucken vor Ort.",
            "required": True,
            "options": [
                {"label": "Digital", "value": "digital"},
                {"label": "Digital & Print", "value": "digital_and_print"},
            ],
            "recommendations": {
                "digital": (
                    "Top! Digital bedeutet unbegrenzt viele Fotos, QR-Downloads und eine DSGVO-konforme "
                    "Online-Galerie."
                ),
                "digital_and_print": "Alles klar, mit Sofortdruck.",
            },
        },
        {
            "id": "event",
            "kind": "event",
            "title": "Event",
            "description": "Welches Event plant ihr?",
            "required": True,
            "options": [
                "Hochzeit",
                "Geburtstag",
                "Internes Firmenevent",
                "Abschlussball",
                "Messe",
                "Kundenevent",
                "Öffentliche Veranstaltung",
                "Sonstiges",
            ],
            "recommendations": {
                "Hochzeit": "Für Hochzeiten lohnt sich ein individuelles Layout mit euren Namen und dem Datum.",
                "Messe": "Auf Messen zieht die Fotobox Besucher an euren Stand, ein Branding im Layout ist Pflicht.",
                "Kundenevent": "Bei Kundenevents empfehlen wir ein Layout mit eurem Logo.",
            },
        },
        {
            "id": "guests",
            "kind": "guests",
            "title": "Gästezahl",
            "description": "Wie viele Gäste erwartet ihr?",
            "required": True,
            "precondition": PRINT_ONLY,
            "options": ["bis 30", "30–50", "50–120", "120–250", "ab 250"],
            "recommendations": {
                "bis 30": (
                    "Bei kleinen Feiern mit bis zu 30 Gästen reicht das kleinste Printpaket mit 100 Prints "
                    "im Postkartenformat vollkommen aus. " + _PRINT_FACTS
                ),
                "30–50": (
                    "Bei Feiern mit 30 bis 50 Gästen empfehle ich das Printpaket mit 200 Prints im "
                    "Postkartenformat. " + _PRINT_FACTS
                ),
                "50–120": (
                    "Bei Feiern mit 50 bis 120 Gästen empfehle ich das Printpaket mit 400 Prints im "
                    "Postkartenformat. " + _PRINT_FACTS
                ),
                "120–250": (
                    "Bei Feiern mit 120 bis 250 Gästen empfehle ich 800 Prints. Im Postkartenformat muss nach "
                    "400 Prints das Media-Kit gewechselt werden, alternativ läuft ein zweiter Drucker mit. "
                    + _PRINT_FACTS
                ),
                "ab 250": (
                    "Bei Events mit mehr als 250 Gästen besprechen wir die Veranstaltung am besten kurz am "
                    "Telefon, damit ich die passende Lösung empfehlen kann."
                ),
            },
            "context_recommendations": [
                {
                    "event": "prom",
                    "guests": "ab 250",
                    "text": (
                        "Bei großen Abschlussbällen ist eine betreute Fotobox mit zwei Drucksystemen sinnvoll. "
                        "Hier bieten sich eine Druck-Flat oder eine Abrechnung nach Verbrauch an."
                    ),
                },
                {
                    "event": "client_event",
                    "guests": "120–250",
                    "text": (
                        "Bei Messen und Kundenevents rechnen wir nach Verbrauch in 100er-Schritten ab. "
                        "Media-Kit und Reserve-Kit stellen wir."
                    ),
                },
                {
                    "event": "client_event",
                    "guests": "ab 250",
                    "text": (
                        "Bei großen Messen und Kundenevents empfehlen wir eine betreute Fotobox mit zwei "
                        "Drucksystemen und Abrechnung nach Verbrauch."
                    ),
                },
            ],
            "after_reply": "Als Nächstes: Welches Druckformat wünscht ihr euch?",
        },
        {
            "id": "format",
            "kind": "format",
            "title": "Druckformat",
            "description": "Welches Druckformat möchtet ihr?",
            "required": True,
            "precondition": PRINT_ONLY,
            "options": [
                {"label": "Postkarte", "value": "postcard"},
                {
                    "label": "Streifen",
                    "value": "strip",
                    "help": "Ein Print ergibt zwei Fotostreifen: 100 Prints entsprechen 200 Fotostreifen.",
                },
                {
                    "label": "Postkarte & Streifen",
                    "value": "dual",
                    "help": "Eure Gäste wählen an der Fotobox selbst; dafür gestalten wir ein zweites Layout.",
                },
                {
                    "label": "Großbild",
                    "value": "large",
                    "help": "Beim Großbildformat entspricht ein Printpaket 200 genau 100 Großbild-Prints.",
                },
            ],
            "after_reply": "Super, dann berücksichtige ich dieses Format für deine Preisübersicht am Ende.",
        },
        {
            "id": "printpkgs",
            "kind": "print_package",
            "title": "Druckpakete",
            "description": "Wähle dein Druckpaket.",
            "required": True,
            "precondition": PRINT_ONLY,
            "options": [
                {"label": "Printpaket 100", "value": "100"},
                {"label": "Printpaket 200", "value": "200"},
                {"label": "Printpaket 400", "value": "400"},
                {"label": "Printpaket 800", "value": "800"},
                {"label": "Printpaket 802, 2 Drucker", "value": "802"},
            ],
        },
        {
            "id": "accessories",
            "kind": "accessories",
            "title": "Zubehör",
            "description": (
                "Ein kleines Zubehörpaket (Requisiten, Hintergrundsystem oder individuelle Layout-Gestaltung) "
                "ist inklusive und wird in der Zusammenfassung berücksichtigt."
            ),
            "multi": True,
            "substeps": [
                {
                    "key": "props",
                    "prompt": "Möchtet ihr lustige Requisiten wie Hüte, Brillen und Schilder dazu?",
                    "confirm_yes": "Requisiten sind notiert.",
                    "confirm_no": "Alles klar, ohne Requisiten.",
                },
                {
                    "key": "backdrop",
                    "prompt": "Soll ein Hintergrundsystem mitkommen?",
                    "confirm_yes": "Hintergrund ist notiert.",
                    "confirm_no": "Alles klar, ohne Hintergrund.",
                },
                {
                    "key": "layout",
                    "prompt": "Wünscht ihr eine individuelle Layout-Gestaltung für eure Prints und Fotos?",
                    "confirm_yes": "Individuelles Layout ist notiert.",
                    "confirm_no": "Alles klar, wir nehmen ein Standard-Layout.",
                },
                {
                    "key": "gala",
                    "prompt": "Interessiert euch das Gala-Paket mit Roter-Teppich-Ausstattung?",
                    "confirm_yes": "Gala-Paket ist notiert.",
                    "confirm_no": "Alles klar, ohne Gala-Paket.",
                },
                {
                    "key": "audio_guestbook",
                    "prompt": "Möchtet ihr ein Audio-Gästebuch für Sprachnachrichten eurer Gäste?",
                    "confirm_yes": "Audio-Gästebuch ist notiert.",
                    "confirm_no": "Alles klar, ohne Audio-Gästebuch.",
                },
            ],
        },
        {
            "id": "summary",
            "kind": "summary",
            "title": "Zusammenfassung",
            "description": "Überprüfe deine Auswahl. Der Preis steht live darunter.",
        },
    ],
    "event_keys": [
        {"key": "wedding", "patterns": ["hochzeit", "wedding"]},
        {"key": "birthday", "patterns": ["geburt", "birthday"]},
        {"key": "prom", "patterns": ["abschluss", "abiball", "prom"]},
        {"key": "internal_event", "patterns": ["internes", "mitarbeiter", "firmenfeier", "weihnachtsfeier"]},
        {"key": "client_event", "patterns": ["externes", "kunden", "messe", "promotion", "recruiting"]},
        {"key": "public_event", "patterns": ["öffentlich", "party", "stadtfest"]},
    ],
    "pricing": {
        "currency": "EUR",
        "base": {"label": "Grundpaket", "amount": "350"},
        "packages": [
            {"size": 100, "label": "Printpaket 100", "amount": "70"},
            {"size": 200, "label": "Printpaket 200", "amount": "100"},
            {"size": 400, "label": "Printpaket 400", "amount": "150"},
            {"size": 800, "label": "Printpaket 800", "amount": "250"},
            {"size": 800, "variant": "dual_printer", "label": "Printpaket 802 (2 Drucksysteme)", "amount": "280"},
        ],
        "package_options": {
            "100": {"size": 100},
            "200": {"size": 200},
            "400": {"size": 400},
            "800": {"size": 800},
            "802": {"size": 800, "variant": "dual_printer"},
        },
        "format_factors": {
            "postcard": ["1"],
            "strip": ["1/2"],
            "large": ["2"],
            "dual": ["1", "1/2"],
        },
        "format_minimums": {"strip": 200},
        "format_units": {
            "postcard": "Prints im Postkartenformat",
            "strip": "Fotostreifen",
            "large": "Prints im Großbildformat",
            "dual": "Prints (Postkarte & Streifen)",
        },
        "surcharges": {
            "second_layout": {"label": "Zweites Layout (Postkarte & Streifen)", "amount": "20"},
        },
        "accessories": {
            "props": {"label": "Requisiten", "amount": "30"},
            "backdrop": {"label": "Hintergrund", "amount": "30"},
            "layout": {"label": "Individuelles Layout", "amount": "30"},
            "gala": {"label": "Gala-Paket", "amount": "80"},
            "audio_guestbook": {"label": "Audio-Gästebuch", "amount": "90"},
        },
        "bundle_eligible": ["props", "backdrop", "layout"],
        "disclosures": [
            {
                "event_key": "client_event",
                "text": (
                    "Hinweis: Bei Messen, Promotions und Recruitingdays erfolgt die Abrechnung nach Verbrauch "
                    "in 100er-Schritten. Media-Kit und Reserve-Kit werden gestellt."
                ),
            }
        ],
    },
}
