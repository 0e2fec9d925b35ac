"""Rule-based intent responder for the website chat assistant"""

from typing import List, Tuple
from westgate_assistant.domain.models import IntentRule

CONTACT_PHONE = "0939 499 4234"
CONTACT_EMAIL = "westgaterealestateserviceshr@gmail.com"
OFFICE_ADDRESS = "Brgy Cabigbigaan, Sto. Domingo, Ilocos Sur"

GREETING = "Hello! I'm your West Gate Realty assistant. How can I help you today?"

FALLBACK_RESPONSE = (
    "I'd be happy to help you with that! For detailed information about our real estate "
    "services, properties, or specific inquiries, please feel free to contact our team "
    f"directly at {CONTACT_PHONE} or visit our office at {OFFICE_ADDRESS}. "
    "Is there a specific property type or service you're interested in?"
)
FALLBACK_INTENT = "fallback"


AGRICULTURAL_PRICING = (
    "Agricultural land pricing varies depending on several factors:\n"
    "• Location and accessibility\n"
    "• Soil quality and irrigation systems\n"
    "• Proximity to markets and transportation\n"
    "• Government zoning and land classification\n\n"
    "We offer flexible payment terms and can assist with agricultural loan applications. "
    "For current market rates and specific property pricing, please contact us directly at "
    f"{CONTACT_PHONE} or visit our office for a detailed consultation."
)

RESIDENTIAL_PRICING = (
    "Residential property pricing varies based on:\n"
    "• Location and neighborhood\n"
    "• Property size and lot area\n"
    "• House design and construction quality\n"
    "• Amenities and features included\n"
    "• Market conditions\n\n"
    "We offer various financing options including in-house financing and bank loan "
    "assistance. All prices include complete documentation and title transfer services. "
    f"Please contact us at {CONTACT_PHONE} for current pricing and to schedule property viewings."
)

COMMERCIAL_PRICING = (
    "Commercial property investments offer excellent opportunities in prime Ilocos "
    "locations. Pricing depends on:\n"
    "• Strategic location and foot traffic\n"
    "• Property size and configuration\n"
    "• Market demand and growth potential\n"
    "• Infrastructure and accessibility\n\n"
    "We provide complete market analysis and investment projections to help you make "
    f"informed decisions. Contact us at {CONTACT_PHONE} for detailed feasibility studies "
    "and current market rates."
)

GENERAL_PRICING = (
    "Our pricing is competitive and transparent across all property types:\n\n"
    "🏡 RESIDENTIAL PROPERTIES\n"
    "🌾 AGRICULTURAL LANDS\n"
    "🏢 COMMERCIAL SPACES\n"
    "☀️ SOLAR INVESTMENT PROJECTS\n\n"
    "All transactions include complete documentation assistance and professional guidance. "
    "We offer flexible payment terms and financing coordination. For specific pricing and "
    f"detailed quotations, please contact us at {CONTACT_PHONE} or visit our office."
)

AGRICULTURAL_LISTINGS = (
    "🌾 AGRICULTURAL PROPERTIES IN ILOCOS:\n\n"
    "✅ AVAILABLE LOCATIONS:\n"
    "• Vigan City - Prime irrigated rice fields\n"
    "• Bantay - Vegetable farming areas\n"
    "• Santa - Mixed crop agricultural zones\n"
    "• Candon - Coastal agricultural lands\n\n"
    "✅ FEATURES:\n"
    "• Established irrigation systems\n"
    "• Rich, fertile soil (Class A)\n"
    "• Year-round water supply\n"
    "• Government support programs\n"
    "• Easy road access\n\n"
    "✅ IDEAL FOR:\n"
    "• Rice production (2-3 harvests/year)\n"
    "• Vegetable farming\n"
    "• Fruit cultivation\n"
    "• Livestock raising\n\n"
    "Sizes available: 1-50 hectares\n"
    "Free site inspection and soil analysis included!\n"
    f"Call {CONTACT_PHONE} to schedule a viewing."
)

SOLAR_PROJECTS = (
    "☀️ SOLAR FARM INVESTMENT OPPORTUNITIES:\n\n"
    "✅ CURRENT PROJECTS:\n"
    "• Large-scale Ilocos Sur Solar Farm\n"
    "• Vigan Solar Development Project\n"
    "• Candon Renewable Energy Initiative\n\n"
    "✅ INVESTMENT BENEFITS:\n"
    "• Government incentives and tax holidays\n"
    "• Long-term Power Purchase Agreements\n"
    "• Guaranteed grid connection\n"
    "• Professional O&M services included\n"
    "• Stable long-term returns\n\n"
    "✅ PROJECT FEATURES:\n"
    "• High-efficiency solar panels\n"
    "• Professional installation and maintenance\n"
    "• Environmental sustainability\n"
    "• Community development support\n\n"
    "Eco-friendly investment with excellent potential!\n"
    f"Contact us at {CONTACT_PHONE} for detailed project information and investment requirements."
)

COMMERCIAL_LISTINGS = (
    "🏢 COMMERCIAL REAL ESTATE PORTFOLIO:\n\n"
    "✅ PRIME LOCATIONS AVAILABLE:\n"
    "• Vigan Heritage District - Tourist hotspots\n"
    "• Laoag Business Center - High foot traffic\n"
    "• Candon Commercial Hub - Growing market\n\n"
    "✅ PROPERTY TYPES:\n"
    "• Retail spaces: Various sizes available\n"
    "• Office buildings: Modern facilities\n"
    "• Mixed-use developments\n"
    "• Warehouse facilities\n\n"
    "✅ INVESTMENT FEATURES:\n"
    "• Excellent rental potential\n"
    "• Strategic locations with growth potential\n"
    "• Complete business permits assistance\n"
    "• Tenant placement services\n\n"
    "✅ FINANCING OPTIONS:\n"
    "• In-house financing available\n"
    "• Bank loan coordination\n"
    "• Flexible payment terms\n\n"
    "Let's find the perfect business location for you!\n"
    f"Call {CONTACT_PHONE} for property viewings and pricing information."
)

DOCUMENTATION_SERVICES = (
    "📋 COMPLETE LEGAL DOCUMENTATION SERVICES:\n\n"
    "✅ PROPERTY DOCUMENTS:\n"
    "• Authority to Sell (ATS)\n"
    "• Special Power of Attorney (SPA)\n"
    "• Deed of Sale preparation\n"
    "• Lease Contracts\n\n"
    "✅ TITLE TRANSFER SERVICES:\n"
    "• Capital Gains Tax (CGT) computation & payment\n"
    "• Documentary Stamp Tax (DST) processing\n"
    "• Transfer Tax calculation\n"
    "• BIR clearance assistance\n"
    "• Registry of Deeds coordination\n\n"
    "✅ GOVERNMENT COORDINATION:\n"
    "• Municipal Assessor liaison\n"
    "• Treasurer's Office processing\n"
    "• Notarization services\n"
    "• Legal review and guidance\n\n"
    "✅ PROFESSIONAL TEAM:\n"
    "• PRC-accredited professionals\n"
    "• Licensed attorneys\n"
    "• Experienced processors\n\n"
    "Timeline: 30-45 days\n"
    f"Call {CONTACT_PHONE} for service fees and document consultation."
)

RESIDENTIAL_LISTINGS = (
    "🏡 RESIDENTIAL PROPERTIES COLLECTION:\n\n"
    "✅ AVAILABLE HOMES:\n"
    "• Modern Family Homes (Vigan) - 4BR/3BA\n"
    "• Traditional Filipino Villas (Bantay) - 5BR/4BA\n"
    "• Beachfront Bungalows (Candon) - 3BR/2BA\n"
    "• Executive Townhouses (Laoag) - 3BR/2BA\n\n"
    "✅ PREMIUM FEATURES:\n"
    "• Modern kitchen & appliances\n"
    "• Landscaped gardens\n"
    "• Secure parking\n"
    "• Quality finishes\n"
    "• Strategic locations\n\n"
    "✅ FINANCING OPTIONS:\n"
    "• In-house financing available\n"
    "• Bank loan assistance\n"
    "• Rent-to-own programs\n"
    "• Flexible payment terms\n\n"
    "✅ COMPLETE PACKAGE INCLUDES:\n"
    "• Full documentation\n"
    "• Title transfer\n"
    "• Utility connections\n"
    "• Move-in ready condition\n\n"
    "Schedule a home tour today!\n"
    f"Call {CONTACT_PHONE} for pricing and property viewings."
)

OFFICE_LOCATION = (
    "📍 WEST GATE REALTY SERVICES OFFICE:\n\n"
    "🏢 ADDRESS:\n"
    f"{OFFICE_ADDRESS}\n\n"
    "🕒 BUSINESS HOURS:\n"
    "Monday-Friday: 8:00 AM - 6:00 PM\n"
    "Saturday: 8:00 AM - 5:00 PM\n"
    "Sunday: By appointment only\n\n"
    "🚗 DIRECTIONS:\n"
    "• 15 minutes from Vigan City proper\n"
    "• Near Sto. Domingo Municipal Hall\n"
    "• Accessible via public transport\n"
    "• Free parking available\n\n"
    "📞 CONTACT OPTIONS:\n"
    f"• Phone: {CONTACT_PHONE}\n"
    f"• Email: {CONTACT_EMAIL}\n"
    "• WhatsApp: Available for quick queries\n\n"
    "🗺️ SERVICE AREAS:\n"
    "We serve the entire Ilocos region and conduct site visits throughout Northern Luzon.\n\n"
    "Visit us for free consultation and property brochures!"
)

CONTACT_DETAILS = (
    "You can reach us at:\n"
    f"📞 {CONTACT_PHONE}\n"
    f"📧 {CONTACT_EMAIL}\n"
    f"📍 {OFFICE_ADDRESS}\n\n"
    "We're also available on WhatsApp for quick consultations!"
)

SERVICES_OVERVIEW = (
    "West Gate Realty Services offers:\n"
    "• Property Listing & Sales\n"
    "• Document Assistance & Preparation\n"
    "• Title Transfer Services\n"
    "• Buyer & Seller Representation\n"
    "• Real Estate Advisory\n\n"
    "We're your complete real estate solution in Ilocos!"
)

CREDENTIALS = (
    "We're fully licensed and accredited! Our credentials include:\n"
    "• DTI Business Registration No. 7087904\n"
    "• PRC Accreditation No. 22818 (Jonathan Rocero Rabanal)\n"
    "• Licensed broker partnerships\n"
    "• Legal attorney collaborations\n\n"
    "You can trust our professional expertise!"
)

INVESTMENT_OUTLOOK = (
    "Real estate investment in Ilocos offers excellent opportunities! Our solar projects "
    "typically yield 15-20% annual returns, while agricultural and commercial properties "
    "provide steady appreciation. We offer complete investment analysis and risk assessment. "
    "Let's discuss your investment goals!"
)

WELCOME = (
    "Hello! Welcome to West Gate Realty Services. I'm here to help you with any questions "
    "about our properties, services, or real estate opportunities in Ilocos. "
    "What would you like to know?"
)

YOURE_WELCOME = (
    "You're welcome! Is there anything else you'd like to know about our real estate "
    "services? I'm here to help with properties, documentation, investments, or any other "
    "questions you might have."
)


def _contains_any(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def _pricing_response(normalized: str) -> str:
    """Price questions branch on the property type mentioned alongside them"""
    if _contains_any(normalized, ("agricultural", "farm")):
        return AGRICULTURAL_PRICING
    if _contains_any(normalized, ("residential", "house", "home")):
        return RESIDENTIAL_PRICING
    if "commercial" in normalized:
        return COMMERCIAL_PRICING
    return GENERAL_PRICING


def _canned(text: str):
    return lambda normalized: text


# Order matters: first match wins.
RULES: List[IntentRule] = [
    IntentRule("pricing", ("price", "cost", "budget"), _pricing_response),
    IntentRule("agricultural", ("agricultural", "farm", "land"), _canned(AGRICULTURAL_LISTINGS)),
    IntentRule("solar", ("solar", "energy", "renewable"), _canned(SOLAR_PROJECTS)),
    IntentRule("commercial", ("commercial", "business", "office"), _canned(COMMERCIAL_LISTINGS)),
    IntentRule("documentation", ("document", "title", "transfer", "legal"), _canned(DOCUMENTATION_SERVICES)),
    IntentRule("residential", ("residential", "house", "home", "villa"), _canned(RESIDENTIAL_LISTINGS)),
    IntentRule("location", ("location", "where", "address"), _canned(OFFICE_LOCATION)),
    IntentRule("contact", ("contact", "phone", "call", "email"), _canned(CONTACT_DETAILS)),
    IntentRule("services", ("service", "what do you do", "help"), _canned(SERVICES_OVERVIEW)),
    IntentRule("certification", ("certification", "license", "accredited"), _canned(CREDENTIALS)),
    IntentRule("investment", ("investment", "roi", "return"), _canned(INVESTMENT_OUTLOOK)),
    IntentRule("greeting", ("hello", "hi", "good"), _canned(WELCOME)),
    IntentRule("thanks", ("thank", "thanks"), _canned(YOURE_WELCOME)),
]


def match_intent(utterance: str, rules: List[IntentRule] = RULES) -> Tuple[str, str]:
    """
    Resolve an utterance to (intent name, response text).

    Matching is case-insensitive substring containment, so "farm" also
    matches "farming" and "farms". Rules are scanned in order and the first
    hit wins; when nothing matches the fallback response is returned.
    """
    normalized = utterance.lower()
    for rule in rules:
        if rule.matches(normalized):
            return rule.name, rule.response(normalized)
    return FALLBACK_INTENT, FALLBACK_RESPONSE


def respond(utterance: str) -> str:
    """Return the canned response for a single user utterance"""
    return match_intent(utterance)[1]
