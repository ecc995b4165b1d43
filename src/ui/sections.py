"""Static page sections: navigation, hero, services, agents, about, contact, footer."""

from datetime import date

from nicegui import ui

from src.agent.config import SiteConfig
from src.ui.contact_form import render_contact_form
from src.ui.state import NavState

NAV_LINKS = [
    ("Services", "#services"),
    ("AI Agents", "#agents"),
    ("About", "#about"),
]

SERVICE_CARDS = [
    (
        "language",
        "Website Creation",
        "Stunning, high-performance websites designed to convert visitors into "
        "loyal customers. Mobile-first and SEO optimized.",
    ),
    (
        "dashboard",
        "Web App Design",
        "Custom web applications that solve complex business problems with "
        "intuitive user interfaces and robust backends.",
    ),
    (
        "memory",
        "Automation Workflows",
        "Connect your favorite apps and automate repetitive tasks. Save countless "
        "hours and reduce human error.",
    ),
]

AGENT_FEATURES = [
    (
        "support_agent",
        "Customer Support Agents",
        "Instant answers to customer queries, anytime, anywhere.",
    ),
    (
        "event",
        "Booking Agents",
        "Seamless appointment scheduling synced with your calendar.",
    ),
    (
        "mic",
        "Voice & Lead Gen Agents",
        "Human-like voice interactions to qualify and nurture leads.",
    ),
]

ABOUT_POINTS = [
    "Mobile Responsive Design",
    "SEO Optimized Code",
    "24/7 Agent Availability",
    "Seamless Integration",
]


def render_logo(classes: str = "") -> None:
    with ui.row().classes(f"items-baseline gap-0 text-2xl font-bold tracking-tight {classes}"):
        ui.label("META").classes("text-meta-orange")
        ui.label("MORPHOSIS").classes("text-meta-green")


def render_nav(nav: NavState) -> None:
    """Fixed navigation bar with a collapsible mobile menu."""
    mobile_menu: ui.column

    def toggle_menu() -> None:
        nav.toggle_menu()
        mobile_menu.set_visibility(nav.menu_open)

    def close_menu() -> None:
        nav.close_menu()
        mobile_menu.set_visibility(False)

    with ui.element("nav").classes("nav-bar fixed w-full z-40 px-6") as bar:
        with ui.row().classes("w-full max-w-6xl mx-auto items-center justify-between"):
            render_logo()
            with ui.row().classes("gt-sm items-center gap-8"):
                for label, href in NAV_LINKS:
                    ui.link(label, href).classes("nav-link")
                ui.link("Get Started", "#contact").classes("nav-cta")
            ui.button(icon="menu", on_click=toggle_menu).props("flat round").classes(
                "lt-md text-meta-green"
            )
        with ui.column().classes("lt-md w-full bg-white shadow-lg") as mobile_menu:
            for label, href in [*NAV_LINKS, ("Contact", "#contact")]:
                ui.link(label, href).classes("mobile-link").on("click", close_menu)
        mobile_menu.set_visibility(False)

    def on_scroll(e) -> None:
        if nav.update_scroll(float(e.args)):
            if nav.scrolled:
                bar.classes(add="nav-scrolled")
            else:
                bar.classes(remove="nav-scrolled")

    ui.on("page_scroll", on_scroll)
    ui.add_body_html(
        "<script>window.addEventListener('scroll', "
        "() => emitEvent('page_scroll', window.scrollY));</script>"
    )


def render_hero() -> None:
    with ui.element("section").classes("hero w-full pt-40 pb-24 px-6"):
        with ui.column().classes("max-w-4xl mx-auto items-center text-center gap-8"):
            with ui.row().classes("items-center gap-2 bg-orange-50 rounded-full px-4 py-1"):
                ui.icon("bolt").classes("text-meta-orange")
                ui.label("AI-Powered Business Transformation").classes(
                    "text-sm font-semibold text-meta-orange"
                )
            ui.html(
                'Digital <span class="hero-accent">Metamorphosis</span> for Your Business',
                sanitize=False,
            ).classes("text-5xl md:text-7xl font-extrabold text-meta-green leading-tight")
            ui.label(
                "We transform ordinary operations into automated powerhouses. Custom "
                "websites, intelligent AI agents, and seamless automation workflows."
            ).classes("text-xl md:text-2xl text-gray-600 max-w-2xl")
            with ui.row().classes("gap-4 justify-center"):
                ui.link("Start Transformation", "#contact").classes("btn-primary")
                ui.link("Explore Services", "#services").classes("btn-outline")


def render_services() -> None:
    with ui.element("section").props("id=services").classes("w-full py-24 px-6 bg-white"):
        with ui.column().classes("max-w-6xl mx-auto items-center gap-12"):
            with ui.column().classes("items-center text-center gap-2"):
                ui.label("Our Services").classes("text-4xl font-bold text-meta-green")
                ui.label(
                    "Comprehensive digital solutions to scale your enterprise."
                ).classes("text-lg text-gray-600")
            with ui.element("div").classes("grid md:grid-cols-3 gap-8 w-full"):
                for icon, title, description in SERVICE_CARDS:
                    with ui.column().classes("service-card p-8 gap-4"):
                        with ui.element("div").classes("service-icon"):
                            ui.icon(icon).classes("text-3xl")
                        ui.label(title).classes("text-xl font-bold text-meta-green")
                        ui.label(description).classes("text-gray-600 leading-relaxed")


def render_agents(site: SiteConfig) -> None:
    with ui.element("section").props("id=agents").classes("agents w-full py-24 px-6"):
        with ui.element("div").classes("grid lg:grid-cols-2 gap-16 max-w-6xl mx-auto"):
            with ui.column().classes("gap-8"):
                ui.html(
                    'Deploy Your <span class="text-meta-orange">Digital Workforce</span>',
                    sanitize=False,
                ).classes("text-4xl md:text-5xl font-bold text-white")
                ui.label(
                    "Why hire more when you can automate? Our specialized AI agents work "
                    "24/7, never sleep, and handle thousands of interactions "
                    "simultaneously."
                ).classes("text-lg text-gray-300")
                for icon, title, description in AGENT_FEATURES:
                    with ui.row().classes("items-start gap-4 no-wrap"):
                        with ui.element("div").classes("agent-icon"):
                            ui.icon(icon).classes("text-2xl")
                        with ui.column().classes("gap-1"):
                            ui.label(title).classes("text-xl font-bold text-white")
                            ui.label(description).classes("text-gray-400")
            with ui.column().classes("preview-card p-6 gap-4"):
                with ui.row().classes("items-center gap-2"):
                    ui.label("Live Preview").classes("font-semibold text-white")
                    ui.label(f"{site.company_name} Lead Agent v2.0").classes(
                        "text-xs text-gray-500"
                    )
                ui.label(site.greeting).classes("preview-bubble p-3 text-sm")
                ui.label("Open the chat in the corner to try it yourself.").classes(
                    "text-sm text-gray-400"
                )
                ui.link("Get This Agent", "#contact").classes("btn-agent")


def render_about(site: SiteConfig) -> None:
    with ui.element("section").props("id=about").classes("w-full py-24 px-6 bg-orange-50"):
        with ui.column().classes("max-w-4xl mx-auto items-center text-center gap-8"):
            ui.label(f"Why {site.company_name}?").classes(
                "text-3xl font-bold text-meta-green"
            )
            ui.label(
                "Just like a caterpillar transforms into a butterfly, we help your "
                "business evolve into its most efficient, beautiful, and capable form."
            ).classes("text-lg text-gray-700")
            with ui.element("div").classes("grid sm:grid-cols-2 gap-6 w-full"):
                for point in ABOUT_POINTS:
                    with ui.row().classes("about-point items-center gap-4 p-4 no-wrap"):
                        ui.icon("check_circle").classes("text-meta-orange text-2xl")
                        ui.label(point).classes("font-semibold text-gray-800")


def render_contact(site: SiteConfig) -> None:
    with ui.element("section").props("id=contact").classes("w-full py-24 px-6 bg-white"):
        with ui.element("div").classes("contact-card grid lg:grid-cols-2 max-w-6xl mx-auto"):
            with ui.column().classes("bg-meta-green p-12 gap-8 text-white"):
                ui.label("Let's Build Something Amazing").classes("text-4xl font-bold")
                ui.label(
                    "Ready to automate your workflow or launch a stunning new website? "
                    "Contact our team today."
                ).classes("text-lg text-green-100")
                for icon, caption, value in (
                    ("phone", "Call Us", site.display_phone),
                    ("mail", "Email Us", site.contact_email),
                ):
                    with ui.row().classes("items-center gap-4"):
                        ui.icon(icon).classes("text-meta-orange text-2xl")
                        with ui.column().classes("gap-0"):
                            ui.label(caption).classes("text-sm text-green-200")
                            ui.label(value).classes("text-xl font-bold")
            with ui.column().classes("p-12 gap-4"):
                render_contact_form(site)


def render_footer(site: SiteConfig) -> None:
    with ui.element("footer").classes("w-full bg-gray-900 text-gray-400 py-12 px-6"):
        with ui.column().classes("max-w-6xl mx-auto w-full gap-8"):
            with ui.row().classes("w-full items-center justify-between"):
                render_logo()
                with ui.row().classes("gap-6"):
                    ui.link("Privacy Policy", "#").classes("footer-link")
                    ui.link("Terms of Service", "#").classes("footer-link")
            ui.label(
                f"© {date.today().year} {site.company_name}. All rights reserved. "
                "Transforming the digital landscape."
            ).classes("w-full text-center text-sm")
