# Operand pools and business vocabulary for the question templates.
# Pools are keyed by difficulty ("easy" / "medium" / "tough"); where a template
# serves both question types the outer key is the type ("accurate" / "estimate").
#
# Accurate pools are picked to have clean mental-math paths
# (10% = /10, 5% = half of 10%, 25% = /4 ...). Estimate pools use messier
# real-world figures.

# ---------- Percent of a number ----------

PERCENT_RATES = {
    "accurate": {
        "easy": [10, 20, 25, 50, 5, 15],
        "medium": [10, 15, 20, 25, 30, 5, 12, 8],  # 12 = 10+2, 8 = 10-2
        "tough": [15, 12, 18, 22, 35, 45, 8, 6],
    },
    "estimate": {
        "easy": [5, 10, 15, 20],
        "medium": [7, 13, 17, 19, 23, 27],
        "tough": [2.5, 4.5, 7, 13, 17, 19, 23, 27, 31, 37, 41, 43, 47],
    },
}

_ESTIMATE_BASES = [
    1_340_000, 2_780_000, 4_560_000, 7_890_000, 13_400_000, 27_800_000,
    45_600_000, 78_900_000, 134_000_000, 278_000_000, 456_000_000, 789_000_000,
    1_340_000_000, 2_780_000_000, 4_560_000_000, 7_890_000_000, 13_400_000_000,
    134_000_000_000, 278_000_000_000,
]

PERCENT_BASES = {
    "accurate": {
        "easy": [100, 200, 400, 500, 1000, 2000, 4000, 5000, 10000, 20000, 50000, 100000],
        "medium": [
            120, 150, 240, 300, 360, 400, 450, 480, 600, 750, 800, 900, 1200, 1500, 1800,
            2400, 3000, 3600, 4500, 4800, 6000, 7500, 8000, 9000, 12000, 15000, 18000,
            24000, 30000, 36000, 45000, 48000, 60000, 75000, 80000, 90000, 120000, 150000,
        ],
        "tough": [
            125, 175, 225, 275, 325, 375, 425, 475, 525, 625, 725, 825, 925, 1250, 1750,
            2250, 2750, 3250, 3750, 4250, 12500, 17500, 22500, 27500, 32500, 125000,
            175000, 225000,
        ],
    },
    "estimate": {
        "easy": _ESTIMATE_BASES[0:6],
        "medium": _ESTIMATE_BASES[3:12],
        "tough": _ESTIMATE_BASES[6:],
    },
}

PERCENT_TIPS = {
    10: "divide by 10",
    5: "half of 10%",
    15: "10% + 5%",
    20: "10% × 2",
    25: "divide by 4",
    50: "divide by 2",
}

ESTIMATE_CONTEXTS = [
    "Total addressable market",
    "Company valuation",
    "Annual revenue",
    "Market size",
    "Industry revenue",
    "Global sales",
]

# ---------- Multiplication / division ----------

MULTIPLICANDS = {
    "easy": [12, 15, 18, 20, 24, 25, 30, 36, 40, 45, 48, 50, 60, 72, 75, 80, 90, 100, 120, 125],
    "medium": [35, 45, 55, 65, 75, 85, 95, 125, 150, 175, 225, 250, 275, 325, 350, 375, 425, 450],
    "tough": [135, 145, 155, 165, 185, 195, 215, 235, 245, 255, 265, 285, 295, 315, 335, 345],
}

MULTIPLIERS = {
    "easy": [2, 3, 4, 5, 6, 8, 10, 11, 12],
    "medium": [7, 9, 12, 15, 18, 24, 25],
    "tough": [13, 14, 16, 17, 19, 21, 22, 23],
}

DIVISORS = {
    "easy": [2, 4, 5, 8, 10],
    "medium": [3, 6, 7, 8, 9, 12, 15],
    "tough": [7, 8, 9, 11, 12, 13, 14, 15, 16, 17, 18],
}

QUOTIENTS = {
    "easy": [15, 20, 25, 30, 35, 40, 45, 50, 60, 75, 80, 100, 120, 125, 150, 200, 250],
    "medium": [45, 60, 72, 80, 90, 96, 108, 120, 135, 144, 150, 160, 180, 200, 240, 250, 300],
    "tough": [125, 144, 156, 168, 175, 192, 225, 234, 256, 275, 288, 325, 350, 375, 400, 425, 450],
}

# ---------- Margins, costs, prices ----------

MARGIN_REVENUES = {
    "accurate": {
        "easy": [100000, 200000, 400000, 500000, 800000, 1000000, 2000000],
        "medium": [120000, 150000, 180000, 240000, 300000, 360000, 450000, 600000, 750000,
                   900000, 1200000, 1500000],
        "tough": [125000, 175000, 225000, 275000, 325000, 375000, 425000, 475000, 525000,
                  625000, 725000, 825000],
    },
    "estimate": {
        "easy": [1_200_000, 3_400_000, 5_600_000, 7_800_000, 12_000_000],
        "medium": [14_500_000, 27_800_000, 43_200_000, 67_500_000, 89_400_000, 124_000_000],
        "tough": [156_000_000, 234_000_000, 478_000_000, 567_000_000, 892_000_000,
                  1_340_000_000],
    },
}

MARGIN_RATES = {
    "accurate": {
        "easy": [10, 20, 25, 50],
        "medium": [10, 15, 20, 25, 30],
        "tough": [12, 15, 18, 22, 24, 28],
    },
    "estimate": {
        "easy": [10, 15, 20, 25],
        "medium": [8, 12, 17, 23, 28],
        "tough": [7, 11, 13, 19, 21, 27],
    },
}

COST_REVENUES = {
    "easy": [100000, 200000, 400000, 500000, 800000, 1000000],
    "medium": [120000, 150000, 180000, 240000, 300000, 360000, 450000, 600000, 750000],
    "tough": [125000, 175000, 225000, 275000, 325000, 375000, 425000, 475000, 525000],
}

COST_RATES = {
    "easy": [50, 60, 70, 75, 80],
    "medium": [55, 60, 65, 70, 75, 80],
    "tough": [58, 62, 68, 72, 78, 82],
}

PRICES = {
    "easy": [100, 200, 400, 500, 800, 1000, 2000, 4000, 5000],
    "medium": [120, 150, 180, 240, 300, 360, 450, 600, 750, 800, 900, 1200],
    "tough": [125, 175, 225, 275, 325, 375, 425, 475, 525, 625, 725, 825],
}

PRICE_CHANGES = {
    "easy": [10, 20, 25, 50],
    "medium": [10, 15, 20, 25, 30],
    "tough": [12, 15, 18, 20, 24, 25],
}

# ---------- Per unit ----------

UNIT_COUNTS = {
    "easy": [10, 20, 25, 40, 50, 100, 200, 250, 500],
    "medium": [24, 36, 48, 60, 72, 84, 96, 120, 144, 150, 180, 240],
    "tough": [125, 144, 156, 175, 192, 225, 256, 275, 324, 375, 400, 432, 450, 500],
}

UNIT_PRICES = {
    "easy": [50, 80, 100, 120, 150, 200, 250, 400, 500],
    "medium": [45, 55, 65, 75, 85, 95, 125, 150, 175, 225, 250, 275],
    "tough": [48, 64, 72, 84, 96, 108, 125, 144, 156, 175, 196, 225],
}

# (plural, singular)
UNIT_ITEMS = [
    ("units", "unit"),
    ("customers", "customer"),
    ("stores", "store"),
    ("employees", "employee"),
]

# ---------- Growth ----------

GROWTH_BASES = {
    "accurate": {
        "easy": [100000, 200000, 400000, 500000, 1000000, 2000000],
        "medium": [120000, 150000, 180000, 240000, 300000, 360000, 450000, 600000, 750000,
                   900000],
        "tough": [125000, 175000, 225000, 275000, 325000, 375000, 425000, 475000, 525000,
                  625000],
    },
    "estimate": {
        "easy": [12_000_000, 34_000_000, 56_000_000, 78_000_000, 120_000_000],
        "medium": [145_000_000, 278_000_000, 432_000_000, 567_000_000, 789_000_000],
        "tough": [1_230_000_000, 2_340_000_000, 3_450_000_000, 4_560_000_000, 5_670_000_000],
    },
}

GROWTH_RATES = {
    "accurate": {
        "easy": [10, 20, 25, 50, 100],
        "medium": [10, 15, 20, 25, 30, 40],
        "tough": [12, 15, 18, 20, 24, 25, 32, 35],
    },
    "estimate": {
        "easy": [15, 20, 25, 30, 40],
        "medium": [17, 23, 28, 33, 42],
        "tough": [13, 19, 27, 31, 37, 43],
    },
}

GROWTH_METRICS = ["revenue", "ARR", "GMV", "sales", "bookings"]

# multi-year compounding is offered on the tough tier only
MULTI_YEAR_BASES = {
    "accurate": [10000, 20000, 50000, 100000, 200000, 500000],
    "estimate": [45_000_000, 120_000_000, 340_000_000, 780_000_000, 1_250_000_000,
                 2_600_000_000],
}
MULTI_YEAR_RATES = {
    "accurate": [10, 20, 50],
    "estimate": [7, 8, 12, 15, 18, 22, 25],
}
MULTI_YEAR_SPANS = {
    "accurate": [2, 3],
    "estimate": [2, 3, 4, 5],
}

# ---------- Break-even ----------

FIXED_COSTS = {
    "medium": [60000, 90000, 120000, 150000, 180000, 240000],
    "tough": [75000, 125000, 175000, 225000, 275000, 325000],
}

UNIT_SALE_PRICES = {
    "medium": [40, 60, 80, 100, 120, 150],
    "tough": [45, 55, 65, 75, 85, 95, 125],
}

# variable cost as a share of price, in percent
VARIABLE_COST_SHARE = {
    "medium": 60,  # 40% contribution margin
    "tough": 65,  # 35% contribution margin
}

# ---------- Reverse percent ----------

REVERSE_WHOLES = {
    "easy": [1000, 2000, 4000, 5000, 10000, 20000, 50000, 100000],
    "medium": [1200, 1500, 1800, 2400, 3000, 3600, 4500, 6000, 7500, 9000, 12000, 15000],
    "tough": [1250, 1750, 2250, 2750, 3250, 3750, 4250, 4750, 5250, 6250, 7250, 8250],
}

REVERSE_RATES = {
    "easy": [10, 20, 25, 50],
    "medium": [10, 15, 20, 25, 30],
    "tough": [12, 15, 18, 20, 24, 25],
}

# ---------- Compound change ----------

COMPOUND_BASES = {
    "medium": [10000, 20000, 50000, 100000, 200000],
    "tough": [12000, 15000, 18000, 24000, 30000, 36000, 45000, 60000, 75000],
}

COMPOUND_FIRST_RATES = {"medium": [10, 20, 25], "tough": [10, 15, 20, 25]}
COMPOUND_SECOND_RATES = {"medium": [10, 20, 25], "tough": [10, 15, 20]}

# ---------- Addition / subtraction ----------

ADD_FIRST = {
    "easy": [250, 450, 750, 850, 1250, 1750, 2500, 3500, 4500, 7500],
    "medium": [1250, 1750, 2250, 2750, 3250, 3750, 4250, 4750, 5250, 6250, 7250, 8250, 9250],
    "tough": [12750, 18250, 23450, 36850, 47350, 58650, 64150, 79950],
}

ADD_SECOND = {
    "easy": [150, 250, 350, 450, 550, 650, 750, 850, 950],
    "medium": [1350, 1650, 1850, 2150, 2350, 2650, 2850, 3150, 3350],
    "tough": [8650, 12350, 15850, 24750, 31450, 42850],
}

# ---------- Market share / valuation / headcount ----------

MARKET_SIZES = {
    "easy": [12_000_000_000, 25_000_000_000, 48_000_000_000, 75_000_000_000, 120_000_000_000],
    "medium": [34_000_000_000, 67_000_000_000, 89_000_000_000, 145_000_000_000,
               234_000_000_000, 378_000_000_000],
    "tough": [156_000_000_000, 289_000_000_000, 423_000_000_000, 567_000_000_000,
              789_000_000_000, 1_230_000_000_000],
}

MARKET_SHARES = {
    "easy": [5, 10, 15, 20, 25],
    "medium": [7, 12, 17, 23, 28],
    "tough": [2.5, 3, 4.5, 7, 11, 13, 17, 19, 23],
}

INDUSTRIES = [
    "cloud computing",
    "electric vehicles",
    "streaming services",
    "food delivery",
    "fintech",
    "cybersecurity",
]

COMPANY_KINDS = [
    "tech startup",
    "retail chain",
    "SaaS company",
    "manufacturing firm",
    "consulting firm",
    "e-commerce business",
]

HEADCOUNT_REVENUES = {
    "easy": [12_000_000, 24_000_000, 36_000_000, 48_000_000, 60_000_000],
    "medium": [78_000_000, 156_000_000, 234_000_000, 312_000_000, 468_000_000],
    "tough": [567_000_000, 892_000_000, 1_234_000_000, 2_345_000_000, 3_456_000_000],
}

HEADCOUNTS = {
    "easy": [100, 200, 300, 400, 500],
    "medium": [650, 850, 1200, 1500, 1800, 2400],
    "tough": [4500, 6700, 8900, 12000, 15000, 23000],
}

VALUATION_REVENUES = {
    "easy": [10_000_000, 25_000_000, 50_000_000, 100_000_000, 200_000_000],
    "medium": [34_000_000, 67_000_000, 89_000_000, 123_000_000, 178_000_000, 234_000_000],
    "tough": [156_000_000, 278_000_000, 389_000_000, 456_000_000, 567_000_000, 789_000_000],
}

VALUATION_MULTIPLES = {
    "easy": [3, 5, 8, 10],
    "medium": [4, 6, 7, 9, 12],
    "tough": [5.5, 7.5, 8.5, 11, 13, 15],
}

# ---------- Weighted average (blended margin) ----------

BLEND_WEIGHTS = {
    "accurate": {
        "medium": [20, 25, 40, 50, 60, 75, 80],
        "tough": [15, 35, 45, 65, 70, 85],
    },
    "estimate": {
        "medium": [23, 37, 41, 58, 62, 71],
        "tough": [17, 29, 43, 53, 67, 79],
    },
}

BLEND_FIRST_RATES = {
    "accurate": {"medium": [10, 20, 30, 40], "tough": [12, 18, 24, 36]},
    "estimate": {"medium": [13, 17, 27, 33], "tough": [11, 19, 31, 38]},
}

BLEND_SECOND_RATES = {
    "accurate": {"medium": [10, 20, 30, 50], "tough": [8, 14, 22, 28]},
    "estimate": {"medium": [6, 9, 19, 24], "tough": [4.5, 7, 14, 21]},
}
