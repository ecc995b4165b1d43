"""NiceGUI single-page marketing site with the floating chat widget."""

from nicegui import ui

from src.agent.config import get_site_config
from src.ui.chat_widget import render_chat_widget
from src.ui.sections import (
    render_about,
    render_agents,
    render_contact,
    render_footer,
    render_hero,
    render_nav,
    render_services,
)
from src.ui.state import NavState

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800&display=swap"
      rel="stylesheet">
<style>
    :root { --meta-orange: #F97316; --meta-green: #14532D; }
    * { font-family: 'Inter', sans-serif; }
    html { scroll-behavior: smooth; }
    body { background: white; }

    .text-meta-orange { color: var(--meta-orange); }
    .text-meta-green { color: var(--meta-green); }
    .bg-meta-green { background: var(--meta-green); }

    .nav-bar { background: transparent; padding-top: 1.5rem; padding-bottom: 1.5rem;
               transition: all 0.3s; }
    .nav-bar.nav-scrolled { background: rgba(255, 255, 255, 0.9); backdrop-filter: blur(12px);
                            box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
                            padding-top: 0.75rem; padding-bottom: 0.75rem; }
    .nav-link { color: var(--meta-green); font-weight: 500; text-decoration: none; }
    .nav-link:hover { color: var(--meta-orange); }
    .nav-cta { background: var(--meta-orange); color: white; padding: 0.5rem 1.5rem;
               border-radius: 9999px; font-weight: 600; text-decoration: none; }
    .mobile-link { display: block; padding: 0.75rem 1rem; color: var(--meta-green);
                   border-left: 4px solid transparent; text-decoration: none; }
    .mobile-link:hover { border-color: var(--meta-orange); background: #f9fafb; }

    .hero { background: linear-gradient(180deg, #fff7ed 0%, #ffffff 100%); }
    .hero-accent { background: linear-gradient(90deg, var(--meta-orange), #ef4444);
                   -webkit-background-clip: text; color: transparent; }
    .btn-primary, .btn-outline, .btn-agent {
        padding: 1rem 2rem; border-radius: 9999px; font-weight: 700;
        font-size: 1.125rem; text-decoration: none; }
    .btn-primary { background: var(--meta-green); color: white; }
    .btn-outline { border: 2px solid var(--meta-green); color: var(--meta-green); }
    .btn-agent { background: #15803d; color: white; border-radius: 0.5rem;
                 text-align: center; font-size: 1rem; }

    .service-card { background: white; border-radius: 1rem;
                    border-top: 4px solid var(--meta-orange);
                    box-shadow: 0 10px 15px rgba(0, 0, 0, 0.1); transition: all 0.3s; }
    .service-card:hover { transform: translateY(-0.5rem);
                          box-shadow: 0 25px 50px rgba(0, 0, 0, 0.25); }
    .service-icon { background: #fff7ed; color: var(--meta-orange); width: 4rem; height: 4rem;
                    border-radius: 9999px; display: flex; align-items: center;
                    justify-content: center; }

    .agents { background: #111827; }
    .agent-icon { background: rgba(249, 115, 22, 0.2); color: var(--meta-orange);
                  padding: 0.75rem; border-radius: 0.5rem; }
    .preview-card { background: #1f2937; border: 1px solid #374151; border-radius: 1rem; }
    .preview-bubble { background: #374151; color: #e5e7eb; border-radius: 0.5rem; }

    .about-point { background: white; border-radius: 0.75rem;
                   box-shadow: 0 1px 3px rgba(0, 0, 0, 0.1); }
    .contact-card { border-radius: 1.5rem; overflow: hidden;
                    box-shadow: 0 25px 50px rgba(0, 0, 0, 0.25); }
    .footer-link { color: #9ca3af; text-decoration: none; }
    .footer-link:hover { color: white; }

    .chat-panel { width: 400px; max-width: calc(100vw - 3rem); height: 500px;
                  background: white; border-radius: 1rem; overflow: hidden;
                  border: 1px solid #e5e7eb; box-shadow: 0 25px 50px rgba(0, 0, 0, 0.25); }
    .chat-user { background: var(--meta-orange); color: white; border-bottom-right-radius: 0; }
    .chat-model { background: white; color: #1f2937; border: 1px solid #e5e7eb;
                  border-bottom-left-radius: 0; }
    .typing-dot { width: 8px; height: 8px; background: #9ca3af; border-radius: 50%;
                  animation: bounce 1.4s infinite ease-in-out; }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }
</style>
"""


@ui.page("/")
def site_page() -> None:
    """Main marketing page."""
    ui.add_head_html(CUSTOM_CSS)
    ui.query(".nicegui-content").classes("p-0 gap-0")
    site = get_site_config()
    nav = NavState()

    render_nav(nav)
    render_hero()
    render_services()
    render_agents(site)
    render_about(site)
    render_contact(site)
    render_footer(site)
    render_chat_widget(site)

