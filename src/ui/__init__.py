"""NiceGUI interface - thin presentation layer for the marketing site.

Responsibilities:
    - Static sections: navigation, hero, services, agents, about, footer
    - Contact form view with inline status
    - Floating chat widget with typing indicator and auto-scroll

UI state (menu, scroll, widget open, transcript) lives in explicit objects
owned by each page instance. Chat replies come from the API; form
submissions go to the form-intake endpoint.
"""
