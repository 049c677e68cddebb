DEFAULT_CATEGORY = 'tools_resources'

# Items shorter than this are not worth a model call
MIN_CLASSIFIABLE_LENGTH = 5

# Unrecognized items are serialized and cut to this many characters
MAX_SERIALIZED_LENGTH = 1000
TRUNCATION_MARKER = '...'

# Declaration order is the tie-break order for every scorer
TWEET_CATEGORIES = [
    {
        'name': 'tech_news',
        'description': 'News about technology companies, product launches, tech industry updates, announcements',
        'keywords': ['announced', 'launches', 'release', 'update', 'new product', 'tech', 'technology']
    },
    {
        'name': 'programming',
        'description': 'Code snippets, programming languages, software development practices, coding tips, developer tools',
        'keywords': ['code', 'coding', 'developer', 'programming', 'software', 'github', 'repository']
    },
    {
        'name': 'ai_ml',
        'description': 'Artificial intelligence, machine learning, data science, neural networks, AI tools and applications',
        'keywords': ['ai', 'artificial intelligence', 'machine learning', 'ml', 'neural', 'gpt', 'llm', 'data science']
    },
    {
        'name': 'career_advice',
        'description': 'Job hunting tips, career growth strategies, interview advice, workplace navigation, professional development',
        'keywords': ['career', 'job', 'interview', 'resume', 'hiring', 'workplace', 'promotion']
    },
    {
        'name': 'personal_growth',
        'description': 'Self-improvement, personal development, habits, mindset shifts, life optimization',
        'keywords': ['habit', 'mindset', 'improve', 'growth', 'better', 'self', 'personal']
    },
    {
        'name': 'marketing',
        'description': 'Marketing strategies, growth hacking, advertising techniques, customer acquisition, branding',
        'keywords': ['marketing', 'growth hack', 'customer', 'acquisition', 'brand', 'audience']
    },
    {
        'name': 'design',
        'description': 'UI/UX design, graphic design, product design, creative processes, design thinking',
        'keywords': ['design', 'ui', 'ux', 'interface', 'user experience', 'graphic', 'visual']
    },
    {
        'name': 'startup',
        'description': 'Startup advice, entrepreneurship, funding, business models, company building',
        'keywords': ['startup', 'founder', 'funding', 'venture', 'entrepreneur', 'business model']
    },
    {
        'name': 'productivity',
        'description': 'Time management, efficiency techniques, workflow optimization, focus strategies, productivity tools',
        'keywords': ['productivity', 'efficient', 'workflow', 'time management', 'focus', 'distraction']
    },
    {
        'name': 'finance',
        'description': 'Investing, money management, financial advice, economics, wealth building',
        'keywords': ['money', 'invest', 'finance', 'financial', 'stock', 'market', 'wealth', 'crypto']
    },
    {
        'name': 'mental_models',
        'description': 'Thinking frameworks, decision-making strategies, cognitive biases, mental frameworks',
        'keywords': ['mental model', 'thinking', 'framework', 'decision', 'cognitive', 'bias']
    },
    {
        'name': 'health_fitness',
        'description': 'Physical health, exercise routines, nutrition advice, wellness practices, fitness tips',
        'keywords': ['health', 'fitness', 'exercise', 'workout', 'diet', 'nutrition', 'sleep']
    },
    {
        'name': 'tools_resources',
        'description': 'Useful software tools, websites, apps, resources, utilities that help with specific tasks',
        'keywords': ['tool', 'resource', 'app', 'website', 'utility', 'software', 'platform']
    },
    {
        'name': 'tutorials',
        'description': 'Step-by-step guides, how-to content, educational material, learning resources',
        'keywords': ['how to', 'guide', 'tutorial', 'learn', 'step by step', 'explained']
    },
    {
        'name': 'inspiration',
        'description': 'Motivational content, success stories, encouraging messages, positive reinforcement',
        'keywords': ['inspire', 'motivation', 'success', 'story', 'achieve', 'overcome']
    },
    {
        'name': 'books',
        'description': 'Book recommendations, reading lists, book summaries, literature discussions',
        'keywords': ['book', 'read', 'author', 'reading', 'literature', 'novel', 'publication']
    },
    {
        'name': 'philosophy',
        'description': 'Deep thoughts, philosophical ideas, meaning of life, ethical considerations',
        'keywords': ['philosophy', 'meaning', 'purpose', 'life', 'ethical', 'moral', 'deep thought']
    },
    {
        'name': 'science',
        'description': 'Scientific discoveries, research findings, academic insights, scientific explanations',
        'keywords': ['science', 'research', 'study', 'scientific', 'discovery', 'experiment']
    },
    {
        'name': 'future_trends',
        'description': 'Predictions about the future, emerging technologies, upcoming shifts, trend analysis',
        'keywords': ['future', 'trend', 'prediction', 'emerging', 'next', 'upcoming', 'revolution']
    }
]
