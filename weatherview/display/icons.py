"""Weather type to icon key resolution and air quality style buckets."""

from weatherview.models.forecast import AirQualityBucket

TRANSITION_MARKER = "转"
UNDEFINED_ICON = "undefined"

WEATHER_ICONS: dict[str, str] = {
    "暴雪": "BaoXue.png",
    "暴雨": "BaoYu.png",
    "暴雨到大暴雨": "BaoYuDaoDaBaoYu.png",
    "大暴雨": "DaBaoYu.png",
    "大暴雨到特大暴雨": "DaBaoYuDaoTeDaBaoYu.png",
    "大到暴雪": "DaDaoBaoXue.png",
    "大雪": "DaXue.png",
    "大雨": "DaYu.png",
    "冻雨": "DongYu.png",
    "多云": "DuoYun.png",
    "浮沉": "FuChen.png",
    "雷阵雨": "LeiZhenYu.png",
    "雷阵雨伴有冰雹": "LeiZhenYuBanYouBingBao.png",
    "霾": "Mai.png",
    "强沙尘暴": "QiangShaChenBao.png",
    "晴": "Qing.png",
    "沙尘暴": "ShaChenBao.png",
    "特大暴雨": "TeDaBaoYu.png",
    UNDEFINED_ICON: "undefined.png",
    "雾": "Wu.png",
    "小到中雪": "XiaoDaoZhongXue.png",
    "小到中雨": "XiaoDaoZhongYu.png",
    "小雪": "XiaoXue.png",
    "小雨": "XiaoYu.png",
    "雪": "Xue.png",
    "扬沙": "YangSha.png",
    "阴": "Yin.png",
    "雨": "Yu.png",
    "雨夹雪": "YuJiaXue.png",
    "阵雪": "ZhenXue.png",
    "阵雨": "ZhenYu.png",
    "中到大雪": "ZhongDaoDaXue.png",
    "中到大雨": "ZhongDaoDaYu.png",
    "中雪": "ZhongXue.png",
    "中雨": "ZhongYu.png",
}

AIR_QUALITY_LEVELS: dict[str, AirQualityBucket] = {
    "优": AirQualityBucket.EXCELLENT,
    "良": AirQualityBucket.GOOD,
    "轻度": AirQualityBucket.LIGHT,
    "中度": AirQualityBucket.MODERATE,
    "重度": AirQualityBucket.HEAVY,
}

# Label background per bucket; text is always white.
AIR_QUALITY_STYLES: dict[AirQualityBucket, str] = {
    AirQualityBucket.EXCELLENT: "rgb(150,213,32)",
    AirQualityBucket.GOOD: "rgb(255,170,127)",
    AirQualityBucket.LIGHT: "rgb(255,199,199)",
    AirQualityBucket.MODERATE: "rgb(255,17,17)",
    AirQualityBucket.HEAVY: "rgb(153,0,0)",
}


def resolve_icon_key(weather_type: str) -> str:
    """Pick the icon table key for a weather description.

    For "A转B" the post-transition state B is preferred, falling back to the
    full string and then A. Unknown descriptions map to ``"undefined"``.
    """
    if TRANSITION_MARKER in weather_type:
        before, _, after = weather_type.partition(TRANSITION_MARKER)
        candidates = (after, weather_type, before)
    else:
        candidates = (weather_type,)
    for candidate in candidates:
        if candidate in WEATHER_ICONS:
            return candidate
    return UNDEFINED_ICON


def icon_file(weather_type: str) -> str:
    return WEATHER_ICONS[resolve_icon_key(weather_type)]


def classify_air_quality(level: str) -> AirQualityBucket | None:
    """Exact match only; unrecognized levels get no styling."""
    return AIR_QUALITY_LEVELS.get(level)


def air_quality_style(level: str) -> str | None:
    bucket = classify_air_quality(level)
    if bucket is None:
        return None
    return AIR_QUALITY_STYLES[bucket]
