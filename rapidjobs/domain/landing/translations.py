from typing import Dict
from typing import Optional

import settings

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "meta.title": "Rapid Jobs - local gigs in minutes",
        "brand.tagline": "Small gigs. Fast pay. Work on your schedule.",
        "nav.home": "Home",
        "nav.how": "How it works",
        "nav.about": "About",
        "nav.help": "Help",
        "nav.getApp": "Get the app",
        "hero.beta": "Beta waitlist",
        "hero.title": "Find local help in minutes - post & hire without resumes",
        "hero.subtitle": (
            "Rapid Jobs is mobile-first - sign up quickly with your phone number "
            "(no password), post or claim gigs from the app, and use real-time "
            "in-app chat to ask questions and confirm details."
        ),
        "hero.pill.quick": "⚡ Quick matches",
        "hero.pill.cash": "💸 Cash friendly",
        "hero.pill.phone": "📱 Phone signup",
        "hero.pill.chat": "💬 In-app chat",
        "hero.placeholder": "you@domain.com",
        "hero.join": "Join waitlist",
        "hero.joining": "Joining…",
        "hero.invalid": "Please enter a valid email.",
        "hero.success": "You're on the waitlist - thanks!",
        "hero.error": "Server error",
        "how.title": "How it works",
        "how.subtitle": (
            "Mobile-first flow: join with your phone, share or claim gigs, "
            "chat to confirm, and get paid fast."
        ),
        "about.title": "A faster, safer way to match local help",
        "about.launch": "Launching soon in El Salvador - join the waitlist",
        "about.p1": (
            "Rapid Jobs connects neighbors who need help with vetted workers "
            "ready to earn. Post small gigs, chat inside the app, and track "
            "payouts without juggling spreadsheets or paperwork."
        ),
        "footer.getApp": "Get the app",
        "download.appstore": "Download on the App Store",
        "download.playstore": "Get it on Google Play",
    },
    "es": {
        "meta.title": "Rapid Jobs - trabajos locales en minutos",
        "brand.tagline": "Trabajos cortos. Pago rápido. Tú eliges el horario.",
        "nav.home": "Inicio",
        "nav.how": "Cómo funciona",
        "nav.about": "Acerca",
        "nav.help": "Ayuda",
        "nav.getApp": "Obtener la app",
        "hero.beta": "Lista de espera Beta",
        "hero.title": (
            "Encuentra ayuda local en minutos - publica y contrata sin currículum"
        ),
        "hero.subtitle": (
            "Rapid Jobs es móvil: regístrate con tu número, publica o acepta "
            "trabajos y usa chat en la app para confirmar detalles."
        ),
        "hero.pill.quick": "⚡ Emparejamientos rápidos",
        "hero.pill.cash": "💸 Efectivo bienvenido",
        "hero.pill.phone": "📱 Registro por teléfono",
        "hero.pill.chat": "💬 Chat en la app",
        "hero.placeholder": "tu@dominio.com",
        "hero.join": "Unirse a la lista",
        "hero.joining": "Enviando…",
        "hero.invalid": "Ingresa un correo válido.",
        "hero.success": "¡Ya estás en la lista de espera, gracias!",
        "hero.error": "Error del servidor",
        "how.title": "Cómo funciona",
        "how.subtitle": (
            "Flujo móvil: regístrate con tu teléfono, publica o acepta trabajos, "
            "chatea para confirmar y recibe el pago rápido."
        ),
        "about.title": "Una forma más rápida y segura de conseguir ayuda local",
        "about.launch": "Próximamente en El Salvador - únete a la lista de espera",
        "about.p1": (
            "Rapid Jobs conecta a vecinos que necesitan ayuda con trabajadores "
            "verificados listos para ganar. Publica trabajos cortos, chatea en la "
            "app y controla pagos sin papeleo."
        ),
        "footer.getApp": "Obtener la app",
        "download.appstore": "Descargar en App Store",
        "download.playstore": "Obtener en Google Play",
    },
}


def is_supported(locale: Optional[str]) -> bool:
    return bool(locale) and locale in settings.SUPPORTED_LOCALES


def translate(locale: str, key: str) -> str:
    """
    Requested locale first, then the default locale, then the key itself
    """
    value = TRANSLATIONS.get(locale, {}).get(key)
    if value is None:
        value = TRANSLATIONS[settings.DEFAULT_LOCALE].get(key)
    return key if value is None else value
