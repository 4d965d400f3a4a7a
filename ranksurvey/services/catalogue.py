"""
Fixed survey catalogue.

Question structure is known ahead of time; nothing here is loaded at runtime.
"""

from __future__ import annotations

from typing import Tuple

from ranksurvey.schemas.survey import Question


QUESTIONS: Tuple[Question, ...] = (
    Question(
        id="q1",
        section="Section 1: Strengthening Current Ecotourism Management",
        text="What types of ecotourism infrastructure should be prioritized immediately in Satchari National Park to improve visitor management and minimize ecological disturbance?",
        options=(
            "Clearly marked walking trails with rest points that avoid core zones and reduce off-trail trampling.",
            "Eco-designed visitor or interpretation center near the entrance showcasing local wildlife, ongoing research, and community contributions in conservation.",
            "Environment-friendly signage and safety boards providing directions, conservation messages, and wildlife etiquette.",
            "Waste-management and sanitation facilities such as segregated bins, composting stations, and eco-toilets.",
            "Visitor monitoring and digital ticketing system with regular patrols to verify entry, prevent unwanted incidents, and assist self-guided tourists.",
        ),
    ),
    Question(
        id="q2",
        text="If tourism remains unregulated or poorly managed in Satchari NP, what immediate impacts are most likely to occur?",
        options=(
            "Increased disturbance to wildlife from noise, flashlights, and uncontrolled crowding.",
            "Habitat degradation through littering, trampling, or creation of unauthorized trails.",
            "Decline in visitor satisfaction due to degraded forest experience and overcrowding.",
            "Reduced trust between local communities and park authorities if promised benefits are not realized.",
            "Misallocation of tourism revenue, limiting reinvestment in conservation and community programs.",
        ),
    ),
    Question(
        id="q3",
        text="If ecotourism at Satchari NP becomes ineffective or unsustainable, what long-term consequences are most likely?",
        options=(
            "Gradual loss of sensitive forest dependent wildlife populations due to persistent disturbance and habitat degradation.",
            "Weakening of community participation and trust in conservation programs.",
            "Decline in the park's reputation as a nature-based tourism destination, affecting visitor numbers and local income.",
            "Increased pressure on forest resources (e.g., hunting, fuelwood collection) as alternative livelihoods fail.",
            "Reduced funding and research presence for long-term biodiversity monitoring and management.",
        ),
    ),
    Question(
        id="q4",
        text="Who should be directly involved in implementing and maintaining immediate ecotourism improvements in Satchari NP?",
        options=(
            "Forest Department and co-management committee members overseeing daily operations.",
            "Local guides, eco-volunteers, and trained youth groups engaged in visitor management.",
            "Academic or research institutions providing technical guidance and ecological monitoring.",
            "NGOs assisting in training, interpretation, and waste-management systems.",
            "Joint operational teams combining park staff, researchers, and local representatives.",
        ),
    ),
    Question(
        id="q5",
        section="Section 2: Visitor Education and Interpretation",
        text="What key messages should visitors to Satchari NP learn to enhance understanding and support for conservation?",
        options=(
            "The ecological importance of mixed evergreen forests for sustaining diverse wildlife animals and plants.",
            "The role of Satchari NP as a biodiversity refuge within a landscape dominated by tea estates and settlements.",
            "How responsible visitor behavior (noise control, waste disposal, respectful observation) directly supports wildlife well-being.",
            "The contributions of local communities and co-management initiatives in protecting the park's biodiversity.",
            "The importance of ongoing research and monitoring to guide adaptive, evidence-based management.",
        ),
    ),
    Question(
        id="q6",
        text="Which methods could be most effective for communicating these conservation messages to visitors in Satchari NP?",
        options=(
            "Guided nature walks or interpretive tours led by trained local guides.",
            "Informative panels, trail markers, and interpretive signboards along major paths and viewing points.",
            "A small visitor center or exhibition space highlighting forest ecology, local culture, and current research.",
            "Interactive digital tools such as QR-coded signboards, mobile applications, or short videos on conservation efforts.",
            "Hands-on participation in citizen-science or wildlife monitoring programs (e.g., bird, primate or butterfly surveys, plant identification).",
        ),
    ),
    Question(
        id="q7",
        section="Section 3: Community Integration and Benefit-Sharing",
        text="In what ways could local communities be more effectively involved in ecotourism at Satchari NP?",
        options=(
            "Guiding and wildlife interpretation for tourists on designated trails.",
            "Managing community-run homestays, food stalls, or handicraft outlets promoting local culture.",
            "Participating in habitat restoration, tree planting, and maintenance of trails and visitor facilities.",
            "Contributing to biodiversity monitoring and citizen-science programs.",
            "Taking part in decision-making through co-management committees or tourism planning groups.",
        ),
    ),
    Question(
        id="q8",
        text="What forms of benefit-sharing from ecotourism would be most acceptable and sustainable for local communities?",
        options=(
            "Direct employment and fair wages for local residents in guiding, hospitality, and park services.",
            "Reinvestment of a portion of visitor fees into community development (e.g., schools, water supply, healthcare).",
            "Support for community-managed enterprises such as eco-cafes, craft centers, or homestays.",
            "Training and capacity building for youth and women in ecotourism and conservation activities.",
            "Incentives or small grants for conservation-friendly practices (e.g., reducing forest extraction, planting native trees).",
        ),
    ),
    Question(
        id="q9",
        text="In your opinion, what is the most effective way for ecotourism revenue in Satchari NP to support biodiversity conservation?",
        options=(
            "Allocating a fixed portion of visitor fees directly to habitat restoration and species monitoring.",
            "Supporting community members engaged in habitat protection and wildlife observation (ecotour guides, forest guards, patrols).",
            "Improving park infrastructure for responsible visitor management (e.g., regulated trails, signage, waste facilities).",
            "Funding environmental education programs for visitors and local residents.",
            "Strengthening enforcement through capacity-building of Forest Department staff and field teams.",
        ),
    ),
)
