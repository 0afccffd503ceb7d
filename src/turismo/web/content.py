"""Static copy of the landing page.

Everything the visitor reads lives here so the templates only deal with
layout. The values are frozen pydantic models and never change after import.
"""

from pydantic import BaseModel, ConfigDict

__all__ = [
    "BRAND",
    "META",
    "HERO",
    "ABOUT",
    "FEATURES",
    "NOTIFY",
    "FOOTER_LINKS",
    "AFFILIATION_NOTE",
]


class _Copy(BaseModel):
    model_config = ConfigDict(frozen=True)


class PageMeta(_Copy):
    title: str
    description: str


class Hero(_Copy):
    badge: str
    headline: str
    lead: str
    primary_cta: str
    secondary_cta: str
    warning: str


class SectionIntro(_Copy):
    title: str
    lead: str


class FeatureCard(_Copy):
    title: str
    body: str


class NotifyCopy(_Copy):
    title: str
    lead: str
    placeholder: str
    submit_label: str
    acknowledgment: str
    disclaimer: str


class FooterLink(_Copy):
    label: str
    href: str


BRAND = "turismo.rs"

META = PageMeta(
    title="turismo.rs — O Futuro do Turismo no Rio Grande do Sul (Em Construção)",
    description=(
        "Uma nova era para o turismo no Rio Grande do Sul. Em breve, uma plataforma "
        "state-of-the-art com roteiros, reservas e experiências personalizadas."
    ),
)

HERO = Hero(
    badge="Plataforma em Construção",
    headline="Uma nova era para o turismo no Rio Grande do Sul.",
    lead=(
        "Estamos desenvolvendo uma plataforma state-of-the-art para unificar roteiros, "
        "reservas e experiências personalizadas. Independente, moderno e focado no viajante."
    ),
    primary_cta="Quero ser o primeiro a saber",
    secondary_cta="Sobre o projeto",
    warning=(
        "Somos um projeto independente, sem afiliação, vínculo ou patrocínio do Governo "
        "do Estado do RS, Secretaria de Turismo ou Cadastur."
    ),
)

ABOUT = SectionIntro(
    title="O que estamos construindo?",
    lead="A visão é ambiciosa: uma plataforma completa que integra tudo o que o viajante precisa.",
)

FEATURES: tuple[FeatureCard, ...] = (
    FeatureCard(
        title="Roteiros Inteligentes",
        body="Por região, tema (enoturismo, ecoturismo) e com sugestões baseadas em seu perfil.",
    ),
    FeatureCard(
        title="Reservas e Ingressos",
        body="Integração direta com parceiros locais para hotéis, passeios e eventos.",
    ),
    FeatureCard(
        title="Mapa Interativo",
        body="Navegação, transfers, pontos de interesse e planejamento de rotas em tempo real.",
    ),
    FeatureCard(
        title="Módulos Futuros",
        body="SSO, portais para parceiros, LGPD e subdomínios para cidades específicas.",
    ),
)

NOTIFY = NotifyCopy(
    title="Não perca o lançamento!",
    lead=(
        "Deixe seu e-mail e seja um dos primeiros a explorar a nova forma de fazer "
        "turismo no Rio Grande do Sul."
    ),
    placeholder="seu-melhor-email@exemplo.com",
    submit_label="Notifique-me",
    acknowledgment="Obrigado! Você será notificado. (Protótipo sem backend)",
    disclaimer="Prometemos não enviar spam. Este formulário é um protótipo sem backend.",
)

AFFILIATION_NOTE = "Projeto independente. Não afiliado ao Governo do RS, SETUR ou Cadastur."

FOOTER_LINKS: tuple[FooterLink, ...] = (
    FooterLink(label="SETUR-RS", href="https://setur.rs.gov.br/inicial"),
    FooterLink(label="Turismo RS (Gov)", href="https://www.turismo.rs.gov.br/turismo/"),
    FooterLink(label="Cadastur", href="https://cadastur.turismo.gov.br"),
)
