"""Static template bank for every mode and response family.

Templates are human-authored strings with `str.format` placeholders:
    - `{excerpt}`: the user's utterance, truncated for display.
    - `{issues}` / `{corrected}`: grammar-mode findings.
No other substitution happens anywhere; the text is otherwise fixed.

The bank is a process-wide constant. `TEMPLATE_BANK` is a read-only mapping
keyed by `(mode, category)`; callers must not mutate it.
"""

from types import MappingProxyType


# =========================================================
# SESSION OPENER
# =========================================================
# Shown by adapters as the assistant's first turn; never produced by the
# pipeline itself.

WELCOME_MESSAGE = (
    "Hello! I'm your ModeChat assistant. I can reason through problems, help "
    "with creative work, and look at a question from several angles. I keep "
    "track of our recent conversation so my answers fit the context. What "
    "would you like to explore together?"
)

# Caller-side apology for unexpected faults around the pipeline call.
FALLBACK_APOLOGY = (
    "I apologize, something went wrong while I was putting that answer "
    "together. Please try again."
)


# =========================================================
# BASE RESPONSE FAMILIES (general mode, deep-dive strategies)
# =========================================================

REASONING_RESPONSE = """I understand you're asking about the underlying mechanisms and reasoning here. Let me break this down systematically:

Based on my analysis, there are several interconnected factors at play. The fundamental principle involves understanding both the direct causation and the broader systemic implications.

Here's my step-by-step reasoning:
1. First, I need to consider the immediate context and variables involved
2. Then, I examine the underlying patterns and relationships
3. Finally, I synthesize this into actionable insights

Would you like me to dive deeper into any specific aspect of this reasoning chain?"""

CREATIVE_RESPONSE = """I'm excited to help with this creative endeavor! My approach combines analytical thinking with creative synthesis to generate truly original content.

Let me tap into multiple creative frameworks and knowledge domains to craft something unique for you. I'll consider various perspectives, styles, and approaches to ensure the output is both innovative and purposeful.

I can adapt my creative process to match your specific vision, whether you need something bold and experimental or refined and polished. What specific direction would you like me to take this creative work?"""

PROBLEM_SOLVING_RESPONSE = """I'm analyzing this problem through multiple lenses to provide you with the most effective solution.

My problem-solving approach involves:
• Root cause analysis to identify the core issues
• Creative ideation to explore unconventional solutions
• Risk assessment to anticipate potential challenges
• Implementation planning with clear action steps

I can see several potential pathways forward, each with different advantages. Let me walk you through the most promising approaches and help you select the optimal strategy for your specific situation.

What constraints or preferences should I consider as we develop this solution?"""

ANALYTICAL_RESPONSE = """I'm conducting a comprehensive analysis using multiple analytical frameworks to give you thorough insights.

My analytical process examines:
- Quantitative patterns and trends
- Qualitative factors and contextual nuances
- Comparative advantages and trade-offs
- Systemic implications and broader impacts

Based on this multi-dimensional analysis, I can provide you with both high-level strategic insights and detailed tactical recommendations. The data suggests several key findings that could significantly impact your decision-making.

Would you like me to focus on any particular aspect of this analysis or explore specific implications in greater detail?"""

CONVERSATIONAL_RESPONSE = """That's a fascinating point you've raised. I can see the depth of thinking behind your question, and I want to engage with it thoughtfully.

From my perspective, this touches on several important considerations that deserve careful exploration. I'm drawing connections across multiple knowledge domains to provide you with insights that are both comprehensive and practically useful.

What I find particularly interesting is how this relates to broader patterns and principles. I'd love to explore this further with you; there are some intriguing implications we could unpack together.

What aspect of this resonates most with you, or is there a particular angle you'd like me to focus on?"""


_BANK = {

    # -----------------------------------------------------
    # general
    # -----------------------------------------------------
    ("general", "reasoning"): REASONING_RESPONSE,
    ("general", "creative"): CREATIVE_RESPONSE,
    ("general", "problem_solving"): PROBLEM_SOLVING_RESPONSE,
    ("general", "analytical"): ANALYTICAL_RESPONSE,
    ("general", "conversational"): CONVERSATIONAL_RESPONSE,
    ("general", "greeting"): (
        "Hello! I'm your ModeChat assistant, ready to help you with a wide "
        "range of tasks. Whether you need information, creative assistance, "
        "problem-solving, or just want to chat, I'm here for you. What can I "
        "help you with today?"
    ),
    ("general", "farewell"): (
        "Thank you for our conversation! I'm always here whenever you need "
        "assistance. Have a wonderful day, and feel free to return anytime you "
        "have questions or need help with anything."
    ),
    ("general", "question"): (
        "That's an excellent question! Let me think about this carefully and "
        "provide you with a comprehensive answer. Based on what you're asking, "
        "here's what I understand and how I can help..."
    ),
    ("general", "positive"): (
        "I'm glad you're having a positive experience! Your enthusiasm is "
        "wonderful to see. I'm here to help maintain that momentum and assist "
        "you with whatever you need. What would you like to explore or "
        "accomplish?"
    ),
    ("general", "clarify"): (
        "I'd love to help you explore that further. Could you provide a bit "
        "more detail about what you're looking for? The more context you give "
        "me, the better I can assist you."
    ),
    ("general", "default"): (
        "I understand what you're saying. As your ModeChat assistant, I'm here "
        "to provide thoughtful, helpful responses tailored to your needs. Based "
        "on your message, I can offer insights, suggestions, or assistance. "
        "What specific aspect would you like me to focus on?"
    ),

    # -----------------------------------------------------
    # study
    # -----------------------------------------------------
    ("study", "question"): (
        "Great question! Let me help you understand this. Based on what you're "
        "asking about \"{excerpt}\", I'll break this down into clear, "
        "manageable parts. What specific aspect would you like me to focus on "
        "first?"
    ),
    ("study", "help"): (
        "I'm here to help you learn! Whether you need explanations, study "
        "strategies, or practice questions, I can adapt to your learning "
        "style. What subject or topic are you working on?"
    ),
    ("study", "default"): (
        "I understand you're studying. Learning is a journey, and I'm here to "
        "support you every step of the way. What would you like to explore or "
        "review today?"
    ),

    # -----------------------------------------------------
    # writing
    # -----------------------------------------------------
    ("writing", "task"): (
        "I'd be happy to help you with your writing! Whether you need help "
        "with structure, clarity, creativity, or editing, I can provide "
        "targeted assistance. What type of writing are you working on?"
    ),
    ("writing", "craft"): (
        "Writing is both an art and a skill that improves with practice. I can "
        "help you with brainstorming, organizing ideas, improving flow, or "
        "polishing your final draft. What's your current writing challenge?"
    ),
    ("writing", "default"): (
        "Every great piece of writing starts with a single word. I'm here to "
        "help you find the right words, structure your thoughts, and express "
        "your ideas clearly. What would you like to write about?"
    ),

    # -----------------------------------------------------
    # support
    # -----------------------------------------------------
    ("support", "frustration"): (
        "I can hear that you're frustrated, and I want to help make this "
        "better. Let's work through this together step by step. What specific "
        "challenge can I help you with?"
    ),
    ("support", "issue"): (
        "I understand you're experiencing an issue. I'm here to help resolve "
        "this for you. Can you provide more details about what's happening so "
        "I can offer the most relevant solution?"
    ),
    ("support", "default"): (
        "I'm here to provide you with the support you need. Whether it's "
        "troubleshooting, guidance, or information, I'll do my best to assist "
        "you promptly and effectively."
    ),

    # -----------------------------------------------------
    # resume
    # -----------------------------------------------------
    ("resume", "task"): (
        "Let's create a compelling resume that showcases your unique "
        "strengths! I can help with formatting, content optimization, skill "
        "highlighting, and tailoring for specific roles. What's your target "
        "position or industry?"
    ),
    ("resume", "default"): (
        "Your resume is your professional story, so let's make it shine! I can "
        "help you highlight achievements, optimize keywords, improve "
        "formatting, and ensure it stands out to recruiters. What aspect would "
        "you like to work on?"
    ),

    # -----------------------------------------------------
    # grammar
    # -----------------------------------------------------
    ("grammar", "correction"): (
        "I noticed a few areas where we can improve the grammar: {issues}. "
        "Here's a corrected version: \"{corrected}\". Would you like me to "
        "explain the changes?"
    ),
    ("grammar", "default"): (
        "Your grammar looks good! I'm here to help with any writing "
        "corrections, style improvements, or clarity enhancements. Feel free "
        "to share any text you'd like me to review."
    ),

    # -----------------------------------------------------
    # travel
    # -----------------------------------------------------
    ("travel", "question"): (
        "Travel planning can be exciting! I can help you with destinations, "
        "itineraries, budgeting, local customs, weather considerations, and "
        "travel tips. What's your dream destination or travel question?"
    ),
    ("travel", "default"): (
        "The world is full of amazing places to explore! Whether you're "
        "planning a weekend getaway or a month-long adventure, I can help make "
        "your trip memorable and well-organized. Where would you like to go?"
    ),

    # -----------------------------------------------------
    # game
    # -----------------------------------------------------
    ("game", "task"): (
        "Let's create some epic game content! I can help you develop character "
        "backstories, write engaging dialogue, create plot twists, or design "
        "interesting NPCs. What kind of game or story element are you working "
        "on?"
    ),
    ("game", "default"): (
        "Welcome to the realm of storytelling! Whether you need character "
        "development, world-building, dialogue writing, or quest design, I'm "
        "here to help bring your game world to life. What story shall we tell?"
    ),

    # -----------------------------------------------------
    # mental
    # -----------------------------------------------------
    ("mental", "negative"): (
        "I hear that things might be challenging right now. While I can't "
        "provide medical advice, I can offer some general wellness techniques "
        "like mindfulness exercises, stress management tips, or positive "
        "thinking strategies. How are you feeling today?"
    ),
    ("mental", "default"): (
        "Taking care of your mental wellness is important. I can share some "
        "general tips for stress management, mindfulness practices, or "
        "positive habits. Remember, for serious concerns, it's always best to "
        "speak with a healthcare professional. How can I support your wellness "
        "journey today?"
    ),
}

TEMPLATE_BANK = MappingProxyType(_BANK)
