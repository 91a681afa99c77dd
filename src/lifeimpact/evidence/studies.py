"""Curated study references for each metric type.

The list is reference data only: it supplies citations and study counts
for display and is never read by the dose-response calculators.
Quality scores are on a 0-1 scale; evidence strength is an ordinal rank
(higher is stronger) used to pick the primary study per metric.
"""

from __future__ import annotations

from lifeimpact.evidence.models import EffectType, PopulationCriteria, StudyReference
from lifeimpact.metrics.types import MetricType

ADULTS = PopulationCriteria(min_age=18)


# =============================================================================
# Activity
# =============================================================================

STEPS_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="paluch-2022-steps",
        metric_type=MetricType.STEPS,
        title="Daily steps and all-cause mortality: a meta-analysis of 15 international cohorts",
        authors="Paluch AE, Bajpai S, Bassett DR, et al.",
        journal="Lancet Public Health",
        year=2022,
        doi="10.1016/S2468-2667(21)00302-9",
        sample_size=47471,
        effect_type=EffectType.DIMINISHING_RETURNS,
        quality_score=0.92,
        evidence_strength=9,
        summary="Mortality risk fell progressively with more daily steps before "
        "levelling off at 6000-8000 steps for older and 8000-10000 for younger adults.",
        criteria=ADULTS,
    ),
    StudyReference(
        id="saint-maurice-2020-steps",
        metric_type=MetricType.STEPS,
        title="Association of Daily Step Count and Step Intensity With Mortality Among US Adults",
        authors="Saint-Maurice PF, Troiano RP, Bassett DR, et al.",
        journal="JAMA",
        year=2020,
        doi="10.1001/jama.2020.1382",
        sample_size=4840,
        effect_type=EffectType.LOGARITHMIC,
        quality_score=0.88,
        evidence_strength=8,
        summary="Taking 8000 steps/day was associated with 51% lower all-cause "
        "mortality compared with 4000 steps/day.",
        criteria=PopulationCriteria(min_age=40, region="US"),
    ),
    StudyReference(
        id="lee-2019-steps",
        metric_type=MetricType.STEPS,
        title="Association of Step Volume and Intensity With All-Cause Mortality in Older Women",
        authors="Lee IM, Shiroma EJ, Kamada M, et al.",
        journal="JAMA Internal Medicine",
        year=2019,
        doi="10.1001/jamainternmed.2019.0899",
        sample_size=16741,
        effect_type=EffectType.THRESHOLD_BASED,
        quality_score=0.85,
        evidence_strength=7,
        summary="Mortality rates declined with more steps until approximately "
        "7500 steps/day.",
        criteria=PopulationCriteria(min_age=62, gender="female", region="US"),
    ),
)

EXERCISE_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="zhao-2020-exercise",
        metric_type=MetricType.EXERCISE_MINUTES,
        title="Recommended physical activity and all cause and cause specific "
        "mortality in US adults: prospective cohort study",
        authors="Zhao M, Veeranki SP, Magnussen CG, Xi B",
        journal="BMJ",
        year=2020,
        doi="10.1136/bmj.m2031",
        sample_size=479856,
        effect_type=EffectType.LOGARITHMIC,
        quality_score=0.9,
        evidence_strength=9,
        summary="Meeting aerobic activity guidelines was associated with a "
        "substantially lower risk of all-cause mortality.",
        criteria=PopulationCriteria(min_age=18, region="US"),
    ),
    StudyReference(
        id="arem-2015-exercise",
        metric_type=MetricType.EXERCISE_MINUTES,
        title="Leisure time physical activity and mortality: a detailed pooled "
        "analysis of the dose-response relationship",
        authors="Arem H, Moore SC, Patel A, et al.",
        journal="JAMA Internal Medicine",
        year=2015,
        doi="10.1001/jamainternmed.2015.0533",
        sample_size=661137,
        effect_type=EffectType.DIMINISHING_RETURNS,
        quality_score=0.9,
        evidence_strength=8,
        summary="Benefit reached a threshold of about 39% lower mortality at "
        "three to five times the recommended minimum, with no harm beyond.",
        criteria=PopulationCriteria(min_age=21, max_age=98),
    ),
    StudyReference(
        id="moore-2016-exercise",
        metric_type=MetricType.EXERCISE_MINUTES,
        title="Association of Leisure-Time Physical Activity With Risk of 26 "
        "Types of Cancer in 1.44 Million Adults",
        authors="Moore SC, Lee IM, Weiderpass E, et al.",
        journal="JAMA Internal Medicine",
        year=2016,
        doi="10.1001/jamainternmed.2016.1548",
        sample_size=1440000,
        effect_type=EffectType.DIMINISHING_RETURNS,
        quality_score=0.8,
        evidence_strength=6,
        summary="Leisure-time physical activity was associated with lower risk "
        "of 13 types of cancer.",
        criteria=ADULTS,
    ),
)

ACTIVE_ENERGY_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="ekelund-2019-active-energy",
        metric_type=MetricType.ACTIVE_ENERGY_BURNED,
        title="Dose-response associations between accelerometry measured "
        "physical activity and sedentary time and all cause mortality: "
        "systematic review and harmonised meta-analysis",
        authors="Ekelund U, Tarp J, Steene-Johannessen J, et al.",
        journal="BMJ",
        year=2019,
        doi="10.1136/bmj.l4570",
        sample_size=36383,
        effect_type=EffectType.DIMINISHING_RETURNS,
        quality_score=0.88,
        evidence_strength=8,
        summary="Higher levels of total physical activity, at any intensity, "
        "were associated with substantially lower mortality.",
        criteria=PopulationCriteria(min_age=40),
    ),
)

BODY_MASS_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="gbmc-2016-body-mass",
        metric_type=MetricType.BODY_MASS,
        title="Body-mass index and all-cause mortality: individual-participant-data "
        "meta-analysis of 239 prospective studies in four continents",
        authors="Global BMI Mortality Collaboration",
        journal="Lancet",
        year=2016,
        doi="10.1016/S0140-6736(16)30175-1",
        sample_size=10625411,
        effect_type=EffectType.U_SHAPED,
        quality_score=0.95,
        evidence_strength=10,
        summary="All-cause mortality was lowest at BMI 20-25 and rose "
        "log-linearly with BMI above 25.",
        criteria=ADULTS,
    ),
    StudyReference(
        id="flegal-2013-body-mass",
        metric_type=MetricType.BODY_MASS,
        title="Association of all-cause mortality with overweight and obesity "
        "using standard body mass index categories",
        authors="Flegal KM, Kit BK, Orpana H, Graubard BI",
        journal="JAMA",
        year=2013,
        doi="10.1001/jama.2012.113905",
        effect_type=EffectType.U_SHAPED,
        quality_score=0.85,
        evidence_strength=7,
        summary="Grade 2 and 3 obesity were associated with significantly "
        "higher all-cause mortality.",
        criteria=ADULTS,
    ),
)


# =============================================================================
# Cardiovascular
# =============================================================================

RESTING_HEART_RATE_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="aune-2017-rhr",
        metric_type=MetricType.RESTING_HEART_RATE,
        title="Resting heart rate and the risk of cardiovascular disease, total "
        "cancer, and all-cause mortality: a systematic review and dose-response "
        "meta-analysis of prospective studies",
        authors="Aune D, Sen A, o'Hartaigh B, et al.",
        journal="Nutrition, Metabolism and Cardiovascular Diseases",
        year=2017,
        doi="10.1016/j.numecd.2017.04.004",
        effect_type=EffectType.LINEAR_CUMULATIVE,
        quality_score=0.9,
        evidence_strength=9,
        summary="Each 10 bpm increase in resting heart rate was associated with "
        "a 17% higher risk of all-cause mortality.",
        criteria=ADULTS,
    ),
    StudyReference(
        id="zhang-2016-rhr",
        metric_type=MetricType.RESTING_HEART_RATE,
        title="Resting heart rate and all-cause and cardiovascular mortality in "
        "the general population: a meta-analysis",
        authors="Zhang D, Shen X, Qi X",
        journal="CMAJ",
        year=2016,
        doi="10.1503/cmaj.150535",
        effect_type=EffectType.LINEAR_CUMULATIVE,
        quality_score=0.87,
        evidence_strength=8,
        summary="Risk of all-cause mortality increased by 9% for every 10 bpm "
        "increment in resting heart rate.",
        criteria=ADULTS,
    ),
)

HRV_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="hillebrand-2013-hrv",
        metric_type=MetricType.HEART_RATE_VARIABILITY,
        title="Heart rate variability and first cardiovascular event in "
        "populations without known cardiovascular disease: meta-analysis and "
        "dose-response meta-regression",
        authors="Hillebrand S, Gast KB, de Mutsert R, et al.",
        journal="Europace",
        year=2013,
        doi="10.1093/europace/eus341",
        effect_type=EffectType.THRESHOLD_BASED,
        quality_score=0.8,
        evidence_strength=7,
        summary="Low HRV was associated with a 32-45% higher risk of a first "
        "cardiovascular event.",
        criteria=ADULTS,
    ),
    StudyReference(
        id="tsuji-1994-hrv",
        metric_type=MetricType.HEART_RATE_VARIABILITY,
        title="Reduced heart rate variability and mortality risk in an elderly "
        "cohort. The Framingham Heart Study",
        authors="Tsuji H, Venditti FJ, Manders ES, et al.",
        journal="Circulation",
        year=1994,
        doi="10.1161/01.CIR.90.2.878",
        sample_size=736,
        effect_type=EffectType.THRESHOLD_BASED,
        quality_score=0.7,
        evidence_strength=5,
        summary="Reduced HRV predicted all-cause mortality independently of "
        "traditional risk factors.",
        criteria=PopulationCriteria(min_age=65, region="US"),
    ),
)

SLEEP_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="cappuccio-2010-sleep",
        metric_type=MetricType.SLEEP_HOURS,
        title="Sleep Duration and All-Cause Mortality: A Systematic Review and "
        "Meta-Analysis of Prospective Studies",
        authors="Cappuccio FP, D'Elia L, Strazzullo P, Miller MA",
        journal="Sleep",
        year=2010,
        doi="10.1093/sleep/33.5.585",
        sample_size=1382999,
        effect_type=EffectType.U_SHAPED,
        quality_score=0.9,
        evidence_strength=9,
        summary="Both short and long sleep duration predicted death; 7-8 hours "
        "per night carried the lowest risk.",
        criteria=ADULTS,
    ),
    StudyReference(
        id="jike-2018-sleep",
        metric_type=MetricType.SLEEP_HOURS,
        title="Long sleep duration and health outcomes: A systematic review, "
        "meta-analysis and meta-regression",
        authors="Jike M, Itani O, Watanabe N, Buysse DJ, Kaneita Y",
        journal="Sleep Medicine Reviews",
        year=2018,
        doi="10.1016/j.smrv.2017.06.011",
        effect_type=EffectType.U_SHAPED,
        quality_score=0.85,
        evidence_strength=8,
        summary="Long sleep was associated with a 39% higher all-cause "
        "mortality risk.",
        criteria=ADULTS,
    ),
)

VO2_MAX_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="kodama-2009-vo2max",
        metric_type=MetricType.VO2_MAX,
        title="Cardiorespiratory fitness as a quantitative predictor of all-cause "
        "mortality and cardiovascular events in healthy men and women: a meta-analysis",
        authors="Kodama S, Saito K, Tanaka S, et al.",
        journal="JAMA",
        year=2009,
        doi="10.1001/jama.2009.681",
        sample_size=102980,
        effect_type=EffectType.LINEAR_CUMULATIVE,
        quality_score=0.9,
        evidence_strength=9,
        summary="Each 1-MET higher fitness was associated with 13% lower "
        "all-cause mortality.",
        criteria=ADULTS,
    ),
    StudyReference(
        id="mandsager-2018-vo2max",
        metric_type=MetricType.VO2_MAX,
        title="Association of Cardiorespiratory Fitness With Long-term Mortality "
        "Among Adults Undergoing Exercise Treadmill Testing",
        authors="Mandsager K, Harb S, Cremer P, et al.",
        journal="JAMA Network Open",
        year=2018,
        doi="10.1001/jamanetworkopen.2018.3605",
        sample_size=122007,
        effect_type=EffectType.LINEAR_CUMULATIVE,
        quality_score=0.85,
        evidence_strength=8,
        summary="Higher fitness was associated with lower mortality with no "
        "observed upper limit of benefit.",
        criteria=PopulationCriteria(min_age=18, region="US"),
    ),
)

OXYGEN_SATURATION_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="vold-2015-spo2",
        metric_type=MetricType.OXYGEN_SATURATION,
        title="Low oxygen saturation and mortality in an adult cohort: the Tromso study",
        authors="Vold ML, Aasebo U, Wilsgaard T, Melbye H",
        journal="BMC Pulmonary Medicine",
        year=2015,
        doi="10.1186/s12890-015-0003-5",
        sample_size=5152,
        effect_type=EffectType.THRESHOLD_BASED,
        quality_score=0.7,
        evidence_strength=6,
        summary="SpO2 of 95% or lower was associated with increased all-cause "
        "mortality.",
        criteria=PopulationCriteria(min_age=40, region="Norway"),
    ),
)


# =============================================================================
# Lifestyle
# =============================================================================

NUTRITION_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="schwingshackl-2018-nutrition",
        metric_type=MetricType.NUTRITION_QUALITY,
        title="Diet Quality as Assessed by the Healthy Eating Index, Alternate "
        "Healthy Eating Index, Dietary Approaches to Stop Hypertension Score, "
        "and Health Outcomes: An Updated Systematic Review and Meta-Analysis of "
        "Cohort Studies",
        authors="Schwingshackl L, Bogensberger B, Hoffmann G",
        journal="Journal of the Academy of Nutrition and Dietetics",
        year=2018,
        doi="10.1016/j.jand.2017.08.024",
        effect_type=EffectType.LINEAR_CUMULATIVE,
        quality_score=0.88,
        evidence_strength=8,
        summary="High diet quality scores were associated with a 22% lower "
        "risk of all-cause mortality.",
        criteria=ADULTS,
    ),
    StudyReference(
        id="sofi-2008-nutrition",
        metric_type=MetricType.NUTRITION_QUALITY,
        title="Adherence to Mediterranean diet and health status: meta-analysis",
        authors="Sofi F, Cesari F, Abbate R, Gensini GF, Casini A",
        journal="BMJ",
        year=2008,
        doi="10.1136/bmj.a1344",
        effect_type=EffectType.LINEAR_CUMULATIVE,
        quality_score=0.85,
        evidence_strength=7,
        summary="A two point increase in Mediterranean diet adherence was "
        "associated with 9% lower overall mortality.",
        criteria=ADULTS,
    ),
)

STRESS_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="russ-2012-stress",
        metric_type=MetricType.STRESS_LEVEL,
        title="Association between psychological distress and mortality: "
        "individual participant pooled analysis of 10 prospective cohort studies",
        authors="Russ TC, Stamatakis E, Hamer M, et al.",
        journal="BMJ",
        year=2012,
        doi="10.1136/bmj.e4933",
        sample_size=68222,
        effect_type=EffectType.THRESHOLD_BASED,
        quality_score=0.8,
        evidence_strength=7,
        summary="Even low levels of psychological distress were associated "
        "with increased all-cause mortality.",
        criteria=PopulationCriteria(min_age=35, region="UK"),
    ),
)

SMOKING_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="jha-2013-smoking",
        metric_type=MetricType.SMOKING_STATUS,
        title="21st-Century Hazards of Smoking and Benefits of Cessation in the United States",
        authors="Jha P, Ramasundarahettige C, Landsman V, et al.",
        journal="New England Journal of Medicine",
        year=2013,
        doi="10.1056/NEJMsa1211128",
        sample_size=216917,
        effect_type=EffectType.LINEAR_CUMULATIVE,
        quality_score=0.95,
        evidence_strength=10,
        summary="Current smokers lost at least a decade of life expectancy "
        "compared with never smokers; quitting before 40 recovered most of it.",
        criteria=PopulationCriteria(min_age=25, region="US"),
    ),
    StudyReference(
        id="doll-2004-smoking",
        metric_type=MetricType.SMOKING_STATUS,
        title="Mortality in relation to smoking: 50 years' observations on male British doctors",
        authors="Doll R, Peto R, Boreham J, Sutherland I",
        journal="BMJ",
        year=2004,
        doi="10.1136/bmj.38142.554479.AE",
        sample_size=34439,
        effect_type=EffectType.LINEAR_CUMULATIVE,
        quality_score=0.9,
        evidence_strength=9,
        summary="Lifelong smokers died on average about 10 years younger than "
        "non-smokers.",
        criteria=PopulationCriteria(gender="male", region="UK"),
    ),
)

ALCOHOL_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="wood-2018-alcohol",
        metric_type=MetricType.ALCOHOL_CONSUMPTION,
        title="Risk thresholds for alcohol consumption: combined analysis of "
        "individual-participant data for 599912 current drinkers in 83 "
        "prospective studies",
        authors="Wood AM, Kaptoge S, Butterworth AS, et al.",
        journal="Lancet",
        year=2018,
        doi="10.1016/S0140-6736(18)30134-X",
        sample_size=599912,
        effect_type=EffectType.THRESHOLD_BASED,
        quality_score=0.92,
        evidence_strength=9,
        summary="The threshold for lowest all-cause mortality was about 100 g "
        "of alcohol per week; higher intake shortened life expectancy.",
        criteria=ADULTS,
    ),
    StudyReference(
        id="gbd-2018-alcohol",
        metric_type=MetricType.ALCOHOL_CONSUMPTION,
        title="Alcohol use and burden for 195 countries and territories, "
        "1990-2016: a systematic analysis for the Global Burden of Disease Study 2016",
        authors="GBD 2016 Alcohol Collaborators",
        journal="Lancet",
        year=2018,
        doi="10.1016/S0140-6736(18)31310-2",
        effect_type=EffectType.LINEAR_CUMULATIVE,
        quality_score=0.88,
        evidence_strength=8,
        summary="The level of consumption that minimised health loss was zero.",
        criteria=PopulationCriteria(min_age=15, region="global"),
    ),
)

SOCIAL_STUDIES: tuple[StudyReference, ...] = (
    StudyReference(
        id="holt-lunstad-2010-social",
        metric_type=MetricType.SOCIAL_CONNECTIONS_QUALITY,
        title="Social Relationships and Mortality Risk: A Meta-analytic Review",
        authors="Holt-Lunstad J, Smith TB, Layton JB",
        journal="PLOS Medicine",
        year=2010,
        doi="10.1371/journal.pmed.1000316",
        sample_size=308849,
        effect_type=EffectType.LINEAR_CUMULATIVE,
        quality_score=0.9,
        evidence_strength=9,
        summary="Stronger social relationships increased the likelihood of "
        "survival by 50%.",
        criteria=ADULTS,
    ),
    StudyReference(
        id="holt-lunstad-2015-social",
        metric_type=MetricType.SOCIAL_CONNECTIONS_QUALITY,
        title="Loneliness and social isolation as risk factors for mortality: "
        "a meta-analytic review",
        authors="Holt-Lunstad J, Smith TB, Baker M, Harris T, Stephenson D",
        journal="Perspectives on Psychological Science",
        year=2015,
        doi="10.1177/1745691614568352",
        sample_size=3407134,
        effect_type=EffectType.THRESHOLD_BASED,
        quality_score=0.85,
        evidence_strength=8,
        summary="Social isolation, loneliness and living alone raised the odds "
        "of mortality by 26-32%.",
        criteria=ADULTS,
    ),
)


STUDIES_BY_METRIC: dict[MetricType, tuple[StudyReference, ...]] = {
    MetricType.STEPS: STEPS_STUDIES,
    MetricType.EXERCISE_MINUTES: EXERCISE_STUDIES,
    MetricType.ACTIVE_ENERGY_BURNED: ACTIVE_ENERGY_STUDIES,
    MetricType.BODY_MASS: BODY_MASS_STUDIES,
    MetricType.RESTING_HEART_RATE: RESTING_HEART_RATE_STUDIES,
    MetricType.HEART_RATE_VARIABILITY: HRV_STUDIES,
    MetricType.SLEEP_HOURS: SLEEP_STUDIES,
    MetricType.VO2_MAX: VO2_MAX_STUDIES,
    MetricType.OXYGEN_SATURATION: OXYGEN_SATURATION_STUDIES,
    MetricType.NUTRITION_QUALITY: NUTRITION_STUDIES,
    MetricType.STRESS_LEVEL: STRESS_STUDIES,
    MetricType.SMOKING_STATUS: SMOKING_STUDIES,
    MetricType.ALCOHOL_CONSUMPTION: ALCOHOL_STUDIES,
    MetricType.SOCIAL_CONNECTIONS_QUALITY: SOCIAL_STUDIES,
}
