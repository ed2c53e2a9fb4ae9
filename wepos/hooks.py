from . import __version__ as app_version

app_name = "wepos"
app_title = "WePOS"
app_publisher = "WePOS"
app_description = "Standalone point of sale frontend for ERPNext"
app_icon = "octicon octicon-device-desktop"
app_color = "#1a73e8"
app_email = "support@wepos.dev"
app_license = "MIT"

# Serves the POS shell before any other website renderer gets a chance
page_renderer = [
    "wepos.frontend.POSPageRenderer",
]

update_website_context = [
    "wepos.frontend.update_website_context",
]

# Extension points (other apps may append their own dotted paths)
wepos_enqueue_scripts = [
    "wepos.utils.assets.enqueue_pos_assets",
]

wepos_settings_sections = []

wepos_settings_fields = []
