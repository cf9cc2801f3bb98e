"""
CSS styles for the ManningMC application.
"""

def load_css():
    """
    Returns the CSS styles for the ManningMC application.
    """
    return """
<style>
    .sidebar .sidebar-content {
        background-color: #F8F9FA;
    }
    .stDownloadButton>button {
        background-color: #3498DB;
        color: white;
        font-weight: bold;
        border-radius: 4px;
        border: none;
    }
    .section-divider {
        margin: 15px 0;
        border-top: 1px solid #E0E0E0;
    }
</style>
"""
