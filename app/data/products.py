"""SellScope — Reference products (50, five per category).

Rows are (name, brand, category, subcategory, price, original_price, tags,
target_audience, seasonality, description). IDs are assigned in order,
starting at product-001. Commission rates come from the category registry.
"""

from app.core.category_registry import get_profile

_ROWS = [
    # Beauty
    ("글로우 세럼", "GlowCo", "Beauty", "Skincare", 45000, 60000, ["skincare", "glow", "anti-aging"], ["20-30s women", "skincare enthusiasts"], ["spring", "summer"], "Vitamin C serum for a bright, even skin tone."),
    ("수분 크림", "AquaDerm", "Beauty", "Skincare", 38000, 48000, ["moisture", "cream"], ["20-40s women", "dry skin"], ["fall", "winter"], "Deep-hydration cream with ceramides."),
    ("선크림 SPF50+", "SunShield", "Beauty", "Suncare", 22000, 28000, ["sunscreen", "uv"], ["all ages"], ["spring", "summer"], "Lightweight daily sunscreen with no white cast."),
    ("벨벳 립 틴트", "ColorPop", "Beauty", "Makeup", 15000, 19000, ["lip", "tint", "makeup"], ["10-20s women"], ["spring", "fall"], "Long-lasting velvet lip tint in six shades."),
    ("쿠션 파운데이션", "SkinFit", "Beauty", "Makeup", 32000, 42000, ["cushion", "base"], ["20-30s women"], ["spring", "summer", "fall", "winter"], "Semi-matte cushion with 24h coverage."),
    # Fashion
    ("오버핏 트렌치코트", "UrbanMood", "Fashion", "Outerwear", 129000, 169000, ["coat", "trench"], ["20-30s women"], ["spring", "fall"], "Classic oversized trench coat in beige."),
    ("데일리 니트 가디건", "KnitLab", "Fashion", "Tops", 49000, 65000, ["knit", "cardigan"], ["20-40s women"], ["fall", "winter"], "Soft wool-blend cardigan for layering."),
    ("와이드 데님 팬츠", "BlueLine", "Fashion", "Bottoms", 59000, 79000, ["denim", "pants"], ["10-30s"], ["spring", "fall"], "High-rise wide-leg jeans."),
    ("미니 크로스백", "BagStory", "Fashion", "Bags", 79000, 99000, ["bag", "leather"], ["20-30s women"], ["spring", "summer", "fall", "winter"], "Vegan-leather mini crossbody bag."),
    ("캔버스 스니커즈", "StepUp", "Fashion", "Shoes", 69000, 89000, ["shoes", "sneakers"], ["10-30s"], ["spring", "summer"], "Everyday low-top canvas sneakers."),
    # Lifestyle
    ("아로마 디퓨저", "ScentHome", "Lifestyle", "Fragrance", 35000, 45000, ["aroma", "diffuser"], ["20-40s"], ["fall", "winter"], "Reed diffuser with cedar and bergamot."),
    ("텀블러 500ml", "EcoCup", "Lifestyle", "Kitchen", 28000, 35000, ["tumbler", "eco"], ["all ages"], ["spring", "summer", "fall", "winter"], "Double-wall stainless tumbler."),
    ("요가 매트", "FlexFit", "Lifestyle", "Fitness", 42000, 55000, ["yoga", "fitness"], ["20-40s women"], ["spring", "summer"], "6mm non-slip TPE yoga mat."),
    ("캠핑 체어", "OutdoorLab", "Lifestyle", "Outdoor", 65000, 85000, ["camping", "chair"], ["30-40s"], ["spring", "summer", "fall"], "Foldable lightweight camping chair."),
    ("무드등 스피커", "LumiSound", "Lifestyle", "Gadgets", 55000, 72000, ["lamp", "speaker"], ["20-30s"], ["fall", "winter"], "Bluetooth speaker with ambient light."),
    # Food
    ("저당 그래놀라", "GoodMorning", "Food", "Breakfast", 18000, 23000, ["granola", "low-sugar"], ["20-40s"], ["spring", "summer", "fall", "winter"], "Low-sugar oat granola with nuts."),
    ("콜드브루 원액", "BrewHouse", "Food", "Coffee", 24000, 30000, ["coffee", "coldbrew"], ["20-40s"], ["spring", "summer"], "Concentrated cold brew, 1L."),
    ("한우 선물세트", "HanwooFarm", "Food", "Meat", 159000, 199000, ["beef", "gift"], ["30-50s"], ["fall", "winter"], "Premium Korean beef gift set."),
    ("닭가슴살 30팩", "FitMeal", "Food", "Protein", 39000, 49000, ["protein", "diet"], ["20-30s"], ["spring", "summer"], "Seasoned chicken breast, 30 packs."),
    ("제주 감귤 5kg", "JejuFresh", "Food", "Fruit", 29000, 36000, ["fruit", "citrus"], ["all ages"], ["winter"], "Fresh Jeju tangerines, 5kg box."),
    # Tech
    ("무선 이어버드", "SoundCore", "Tech", "Audio", 89000, 119000, ["earbuds", "wireless"], ["10-30s"], ["spring", "summer", "fall", "winter"], "ANC wireless earbuds with 30h battery."),
    ("스마트 워치", "FitTime", "Tech", "Wearables", 189000, 239000, ["watch", "fitness"], ["20-40s"], ["winter"], "AMOLED smartwatch with health tracking."),
    ("보조배터리 20000mAh", "PowerPlus", "Tech", "Accessories", 35000, 45000, ["battery", "charging"], ["all ages"], ["summer", "winter"], "Fast-charging power bank."),
    ("기계식 키보드", "KeyMaster", "Tech", "Peripherals", 99000, 129000, ["keyboard", "mechanical"], ["20-30s"], ["fall", "winter"], "Hot-swappable mechanical keyboard."),
    ("웹캠 FHD", "ClearView", "Tech", "Peripherals", 49000, 65000, ["webcam", "streaming"], ["20-40s"], ["fall", "winter"], "1080p webcam with auto-focus."),
    # HomeLiving
    ("극세사 이불 세트", "SleepWell", "HomeLiving", "Bedding", 89000, 119000, ["bedding", "blanket"], ["20-50s"], ["fall", "winter"], "Micro-fiber duvet set, queen size."),
    ("무선 청소기", "CleanPro", "HomeLiving", "Appliances", 199000, 249000, ["vacuum", "cordless"], ["30-50s"], ["spring", "fall"], "Cordless stick vacuum, 60min runtime."),
    ("원목 수납장", "WoodNest", "HomeLiving", "Furniture", 149000, 189000, ["storage", "wood"], ["30-40s"], ["spring", "fall"], "Solid-wood three-drawer cabinet."),
    ("규조토 발매트", "DryStep", "HomeLiving", "Bath", 19000, 25000, ["bath", "mat"], ["all ages"], ["summer"], "Quick-dry diatomite bath mat."),
    ("스테인리스 냄비 세트", "CookMate", "HomeLiving", "Kitchen", 119000, 159000, ["cookware", "pot"], ["30-50s"], ["fall", "winter"], "Five-piece stainless steel pot set."),
    # Health
    ("종합 비타민", "VitaDay", "Health", "Supplements", 32000, 40000, ["vitamin", "supplement"], ["20-50s"], ["spring", "summer", "fall", "winter"], "Daily multivitamin, 90 tablets."),
    ("유산균 60포", "BioGut", "Health", "Supplements", 45000, 59000, ["probiotics", "gut"], ["20-50s"], ["spring", "summer", "fall", "winter"], "Probiotic sticks with 10 strains."),
    ("콜라겐 젤리", "BeautyIn", "Health", "Inner Beauty", 29000, 38000, ["collagen", "jelly"], ["20-40s women"], ["spring", "summer"], "Low-molecular collagen jelly sticks."),
    ("마사지 건", "RelaxPro", "Health", "Devices", 129000, 169000, ["massage", "recovery"], ["20-40s"], ["fall", "winter"], "Percussion massage gun, 6 heads."),
    ("홍삼 스틱", "RedRoot", "Health", "Traditional", 59000, 75000, ["red ginseng", "energy"], ["30-60s"], ["fall", "winter"], "Korean red ginseng extract sticks."),
    # BabyKids
    ("유기농 아기 로션", "LittleLeaf", "BabyKids", "Baby Care", 24000, 30000, ["baby", "lotion"], ["new parents"], ["fall", "winter"], "Fragrance-free organic baby lotion."),
    ("원목 블록 장난감", "PlayWood", "BabyKids", "Toys", 39000, 49000, ["toy", "wooden"], ["parents of toddlers"], ["winter"], "Fifty-piece wooden block set."),
    ("아기 물티슈 10팩", "SoftTouch", "BabyKids", "Baby Care", 15000, 19000, ["wipes", "baby"], ["new parents"], ["spring", "summer", "fall", "winter"], "Thick baby wipes, 10 packs."),
    ("유아 카시트", "SafeRide", "BabyKids", "Gear", 189000, 229000, ["car seat", "safety"], ["new parents"], ["spring", "fall"], "ISOFIX convertible car seat."),
    ("키즈 그림책 세트", "StoryTree", "BabyKids", "Books", 49000, 62000, ["books", "education"], ["parents of 3-7 year olds"], ["winter"], "Twenty-book picture-book collection."),
    # Pet
    ("강아지 사료 6kg", "PawMeal", "Pet", "Food", 55000, 69000, ["dog", "food"], ["dog owners"], ["spring", "summer", "fall", "winter"], "Grain-free dog food with salmon."),
    ("고양이 스크래쳐", "CatNest", "Pet", "Toys", 25000, 32000, ["cat", "scratcher"], ["cat owners"], ["spring", "summer", "fall", "winter"], "Corrugated scratcher lounge."),
    ("반려동물 자동급식기", "FeedTime", "Pet", "Devices", 79000, 99000, ["feeder", "smart"], ["pet owners"], ["summer", "winter"], "App-controlled automatic feeder."),
    ("강아지 패딩", "PetStyle", "Pet", "Apparel", 35000, 45000, ["dog", "clothing"], ["dog owners"], ["winter"], "Lightweight padded dog jacket."),
    ("고양이 모래 10L", "CleanPaw", "Pet", "Supplies", 19000, 24000, ["cat", "litter"], ["cat owners"], ["spring", "summer", "fall", "winter"], "Tofu cat litter, dust-free."),
    # Stationery
    ("만년필 세트", "InkCraft", "Stationery", "Writing", 69000, 89000, ["pen", "fountain"], ["20-40s"], ["spring", "fall"], "Fountain pen with three ink cartridges."),
    ("2026 다이어리", "PlanIt", "Stationery", "Planners", 22000, 28000, ["diary", "planner"], ["10-30s"], ["fall", "winter"], "Undated weekly planner, A5."),
    ("마스킹 테이프 20종", "TapeArt", "Stationery", "Decoration", 12000, 15000, ["tape", "deco"], ["10-20s"], ["spring", "summer", "fall", "winter"], "Set of twenty washi tapes."),
    ("아이패드 드로잉 펜", "SketchPro", "Stationery", "Digital", 39000, 49000, ["stylus", "drawing"], ["10-30s"], ["spring", "fall"], "Palm-rejection stylus for tablets."),
    ("가죽 필통", "PencilCase", "Stationery", "Accessories", 28000, 35000, ["pencil case", "leather"], ["10-30s"], ["spring"], "Minimal leather pencil case."),
]


def _build_products() -> list[dict]:
    products = []
    for idx, row in enumerate(_ROWS, start=1):
        (name, brand, category, subcategory, price, original_price,
         tags, audience, seasonality, description) = row
        product_id = f"product-{idx:03d}"
        products.append(
            {
                "id": product_id,
                "name": name,
                "brand": brand,
                "category": category,
                "subcategory": subcategory,
                "price": price,
                "original_price": original_price,
                "description": description,
                "image_url": f"https://images.sellscope.dev/products/{product_id}.jpg",
                "tags": tags,
                "target_audience": audience,
                "seasonality": seasonality,
                "avg_commission_rate": get_profile(category).commission_rate,
            }
        )
    return products


PRODUCT_SEED = _build_products()
