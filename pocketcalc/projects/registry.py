"""
Project Registry - Centralized configuration for everything listed on the homepage.

To add a new project:
1. Create the project directory and files
2. Register the blueprint in pocketcalc/__init__.py
3. Add an entry to PROJECTS list below

Project Types:
- 'project': Page with its own UI
- 'api': JSON endpoint, linked directly
"""

PROJECTS = [
    {
        'id': 'calculator',
        'name': 'Calculator',
        'description': 'Four-function calculator with percent and sign toggle',
        'url': '/calculator',
        'status': 'active',
        'type': 'project',
        'icon': '🧮',
        'order': 1
    },
    {
        'id': 'hello',
        'name': 'Hello API',
        'description': 'Returns a static JSON greeting',
        'url': '/api/hello',
        'status': 'active',
        'type': 'api',
        'icon': '👋',
        'order': 2
    },
]


def get_all_projects():
    """
    Get all projects sorted by order.

    Returns:
        list: List of all projects sorted by order field
    """
    return sorted(PROJECTS, key=lambda x: x['order'])


def get_homepage_items():
    """
    Get items to display on the homepage, each with an 'available' flag.

    Returns:
        list: Copies of the projects with 'available' set
    """
    items = []
    for project in get_all_projects():
        project_copy = project.copy()
        project_copy['available'] = project['status'] == 'active'
        items.append(project_copy)

    return items
