from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

SAMPLE_DATASETS: Dict[str, List[Dict[str, Any]]] = {
    'states': [
        {'state': 'California', 'population': 39538223, 'region': 'West'},
        {'state': 'Texas', 'population': 29145505, 'region': 'South'},
        {'state': 'Florida', 'population': 21538187, 'region': 'South'},
        {'state': 'New York', 'population': 20201249, 'region': 'Northeast'},
        {'state': 'Pennsylvania', 'population': 13002700, 'region': 'Northeast'},
        {'state': 'Illinois', 'population': 12812508, 'region': 'Midwest'},
        {'state': 'Ohio', 'population': 11799448, 'region': 'Midwest'},
        {'state': 'Georgia', 'population': 10711908, 'region': 'South'},
        {'state': 'North Carolina', 'population': 10439388, 'region': 'South'},
        {'state': 'Michigan', 'population': 10037261, 'region': 'Midwest'},
    ],
    'cities': [
        {'name': 'Tokyo', 'country': 'Japan', 'population': 37400068},
        {'name': 'Delhi', 'country': 'India', 'population': 29399141},
        {'name': 'Shanghai', 'country': 'China', 'population': 26317104},
        {'name': 'São Paulo', 'country': 'Brazil', 'population': 21650000},
        {'name': 'Mexico City', 'country': 'Mexico', 'population': 21581000},
    ],
    'books': [
        {'title': 'The Great Gatsby', 'author': 'F. Scott Fitzgerald', 'year': 1925, 'genre': 'Fiction'},
        {'title': 'To Kill a Mockingbird', 'author': 'Harper Lee', 'year': 1960, 'genre': 'Fiction'},
        {'title': '1984', 'author': 'George Orwell', 'year': 1949, 'genre': 'Dystopian'},
        {'title': 'Pride and Prejudice', 'author': 'Jane Austen', 'year': 1813, 'genre': 'Romance'},
        {'title': 'The Catcher in the Rye', 'author': 'J.D. Salinger', 'year': 1951, 'genre': 'Fiction'},
    ],
}

SAMPLE_LABELS: Dict[str, str] = {
    'states': 'US States Population',
    'cities': 'World Cities',
    'books': 'Books',
}


def sample_text(name: str) -> str:
    """Pretty-printed JSON for a built-in sample."""
    if name not in SAMPLE_DATASETS:
        raise KeyError(f"Unknown sample dataset: {name}")
    return json.dumps(SAMPLE_DATASETS[name], indent=2, ensure_ascii=False)


def sample_queries(alias: str) -> List[Tuple[str, str]]:
    """(label, sql) pairs offered for the current alias."""
    queries = [
        (f"All {alias}", f"SELECT * FROM {alias}"),
        (
            'States with pop > 20M' if alias == 'states' else 'Filtered data',
            f"SELECT * FROM {alias} WHERE population > 20000000",
        ),
    ]
    if alias == 'states':
        queries.append(('States in the South', f"SELECT state FROM {alias} WHERE region = 'South'"))
    return queries
