"""SellScope — Reference creators (20).

Distribution:
- Instagram: 8, YouTube: 7, TikTok: 5
- Micro (10K-50K): 4, Mid (50K-200K): 7, Large (200K-1M): 9
"""

CREATOR_SEED = [
    # Instagram (8)
    {"id": "creator-001", "name": "김지은", "platform": "Instagram", "followers": 250000, "engagement_rate": 4.2, "categories": ["Beauty", "Fashion"], "email": "jieun.kim@example.com", "joined_at": "2025-01-15T09:00:00Z"},
    {"id": "creator-002", "name": "이서연", "platform": "Instagram", "followers": 380000, "engagement_rate": 3.6, "categories": ["Fashion", "Lifestyle"], "email": "seoyeon.lee@example.com", "joined_at": "2025-02-01T08:00:00Z"},
    {"id": "creator-003", "name": "박민지", "platform": "Instagram", "followers": 125000, "engagement_rate": 5.1, "categories": ["Beauty", "Health"], "email": "minji.park@example.com", "joined_at": "2024-11-10T10:30:00Z"},
    {"id": "creator-004", "name": "정수진", "platform": "Instagram", "followers": 45000, "engagement_rate": 6.8, "categories": ["Fashion", "Stationery"], "email": "sujin.jung@example.com", "joined_at": "2025-03-20T14:20:00Z"},
    {"id": "creator-005", "name": "최예린", "platform": "Instagram", "followers": 620000, "engagement_rate": 2.9, "categories": ["Beauty", "Lifestyle"], "email": "yerin.choi@example.com", "joined_at": "2024-09-05T11:45:00Z"},
    {"id": "creator-006", "name": "강은비", "platform": "Instagram", "followers": 88000, "engagement_rate": 4.7, "categories": ["Fashion", "Pet"], "email": "eunbi.kang@example.com", "joined_at": "2024-12-15T09:30:00Z"},
    {"id": "creator-007", "name": "윤지아", "platform": "Instagram", "followers": 32000, "engagement_rate": 7.3, "categories": ["Lifestyle", "HomeLiving"], "email": "jia.yoon@example.com", "joined_at": "2025-04-08T16:00:00Z"},
    {"id": "creator-008", "name": "한소희", "platform": "Instagram", "followers": 175000, "engagement_rate": 3.9, "categories": ["Beauty", "Fashion"], "email": "sohee.han@example.com", "joined_at": "2024-10-22T10:15:00Z"},
    # YouTube (7)
    {"id": "creator-009", "name": "박준호", "platform": "YouTube", "followers": 580000, "engagement_rate": 3.1, "categories": ["Tech", "Lifestyle"], "email": "junho.park@example.com", "joined_at": "2024-11-20T10:30:00Z"},
    {"id": "creator-010", "name": "정하은", "platform": "YouTube", "followers": 450000, "engagement_rate": 3.4, "categories": ["Beauty", "Health", "Lifestyle"], "email": "haeun.jung@example.com", "joined_at": "2024-10-05T11:45:00Z"},
    {"id": "creator-011", "name": "김도현", "platform": "YouTube", "followers": 295000, "engagement_rate": 4.0, "categories": ["Food", "Health"], "email": "dohyun.kim@example.com", "joined_at": "2025-01-30T13:20:00Z"},
    {"id": "creator-012", "name": "이민석", "platform": "YouTube", "followers": 720000, "engagement_rate": 2.5, "categories": ["Tech", "Food"], "email": "minseok.lee@example.com", "joined_at": "2024-08-15T09:00:00Z"},
    {"id": "creator-013", "name": "서지우", "platform": "YouTube", "followers": 150000, "engagement_rate": 4.4, "categories": ["Lifestyle", "HomeLiving"], "email": "jiwoo.seo@example.com", "joined_at": "2024-12-01T15:30:00Z"},
    {"id": "creator-014", "name": "조민수", "platform": "YouTube", "followers": 65000, "engagement_rate": 5.6, "categories": ["Health", "Food"], "email": "minsu.jo@example.com", "joined_at": "2025-02-18T10:00:00Z"},
    {"id": "creator-015", "name": "배서윤", "platform": "YouTube", "followers": 18000, "engagement_rate": 8.2, "categories": ["BabyKids", "Pet"], "email": "seoyoon.bae@example.com", "joined_at": "2025-03-05T14:45:00Z"},
    # TikTok (5)
    {"id": "creator-016", "name": "최민수", "platform": "TikTok", "followers": 120000, "engagement_rate": 6.1, "categories": ["Food", "Health"], "email": "minsu.choi@example.com", "joined_at": "2024-12-10T14:20:00Z"},
    {"id": "creator-017", "name": "송하늘", "platform": "TikTok", "followers": 340000, "engagement_rate": 5.3, "categories": ["Fashion", "Beauty"], "email": "haneul.song@example.com", "joined_at": "2024-09-25T11:00:00Z"},
    {"id": "creator-018", "name": "임재현", "platform": "TikTok", "followers": 85000, "engagement_rate": 6.5, "categories": ["Tech", "Lifestyle"], "email": "jaehyun.lim@example.com", "joined_at": "2025-01-08T09:30:00Z"},
    {"id": "creator-019", "name": "권나영", "platform": "TikTok", "followers": 25000, "engagement_rate": 9.0, "categories": ["Stationery", "Lifestyle"], "email": "nayoung.kwon@example.com", "joined_at": "2025-04-12T16:20:00Z"},
    {"id": "creator-020", "name": "안지훈", "platform": "TikTok", "followers": 195000, "engagement_rate": 5.8, "categories": ["Pet", "Lifestyle"], "email": "jihoon.ahn@example.com", "joined_at": "2024-11-28T12:00:00Z"},
]
