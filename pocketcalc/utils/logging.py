"""
Logging utilities for tracking activity across the site.
"""

from pocketcalc import db
from pocketcalc.models import LogEntry


def log_project_visit(project_name, project_display_name=None):
    """
    Log a visit to a project/page.
    
    Args:
        project_name (str): The project identifier (e.g., 'calculator')
        project_display_name (str, optional): Human-readable name for the description.
                                              Defaults to project_name if not provided.
    """
    display_name = project_display_name or project_name
    
    log_entry = LogEntry(
        project=project_name,
        category='Visit',
        description=f"Anonymous user visited {display_name}"
    )
    db.session.add(log_entry)
    db.session.commit()
