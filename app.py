import logging
import streamlit as st

from fundscore.config import get_settings

SETTINGS = get_settings()

# Must be first Streamlit call
st.set_page_config(page_title=SETTINGS.page_title, layout="centered")

logging.basicConfig(
    level=SETTINGS.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("fundscore.app")

# ----------------------------
# Imports (engine)
# ----------------------------
from fundscore.categories import CATEGORIES, FIELD_NAMES
from fundscore.scoring import evaluate, ScoreInputError, ENGINE_VERSION, RULESET_VERSION
from fundscore.validation import check_inputs, is_valid_score
from fundscore.playbook import build_playbook
from fundscore.gauge import render_gauge_svg
from fundscore.pdf_report import build_pdf_report

# ----------------------------
# Session state
# ----------------------------
# Form values and the last result are owned here; the engine is stateless.
for f in FIELD_NAMES:
    if f"score_{f}" not in st.session_state:
        st.session_state[f"score_{f}"] = None
if "last_result" not in st.session_state:
    st.session_state.last_result = None
if "last_playbook" not in st.session_state:
    st.session_state.last_playbook = None

# ----------------------------
# Styling
# ----------------------------
st.markdown(
    """
<style>
.block-container { padding-top: 1.1rem; padding-bottom: 2rem; }
h1, h2, h3 { letter-spacing: -0.02em; }
.big-score { font-size: 3rem; font-weight: 800; color: #2563EB; text-align: center; line-height: 1.1; }
.overview { text-align: center; color: rgba(0,0,0,0.62); margin-top: 0.5rem; }
.rec-row { display: flex; gap: 0.5rem; align-items: flex-start; margin: 0.35rem 0; }
.rec-dot { width: 0.5rem; height: 0.5rem; border-radius: 999px; margin-top: 0.45rem; flex: none; }
.bar-track { width: 100%; background: #E5E7EB; border-radius: 999px; height: 0.5rem; }
.bar-fill { height: 0.5rem; border-radius: 999px; }
.scale { display: flex; justify-content: space-between; font-size: 0.75rem; color: #6B7280; margin-top: 0.25rem; }
</style>
""",
    unsafe_allow_html=True,
)

# ----------------------------
# Helpers
# ----------------------------
def badge(text: str, bg: str):
    st.markdown(
        f"""
        <div style="text-align:center;">
        <span style="
            display:inline-block;
            padding:0.25rem 0.75rem;
            border-radius:999px;
            font-size:0.85rem;
            font-weight:600;
            color:#FFFFFF;
            background:{bg};
        ">{text}</span>
        </div>
        """,
        unsafe_allow_html=True,
    )


def bar(pct: float, color: str = "#2563EB"):
    pct = max(0.0, min(100.0, float(pct)))
    st.markdown(
        f'<div class="bar-track"><div class="bar-fill" style="width:{pct}%;background:{color};"></div></div>',
        unsafe_allow_html=True,
    )


def current_inputs() -> dict:
    return {f: st.session_state.get(f"score_{f}") for f in FIELD_NAMES}


SAMPLE_PROFILES = {
    "Idea stage": {
        "market_size": 6, "product_uniqueness": 5, "customer_validation": 2,
        "revenue_stage": 0, "gross_margins": 2, "financial_projections": 3,
        "founders_experience": 4, "team_composition": 3, "execution_capability": 3,
        "scalability": 4, "risks": 3, "industry_trends": 5,
        "funding_clarity": 2, "previous_investment": 0, "investor_fit": 2,
    },
    "Seed-ready SaaS": {
        "market_size": 7, "product_uniqueness": 6.5, "customer_validation": 6,
        "revenue_stage": 5, "gross_margins": 6, "financial_projections": 5.5,
        "founders_experience": 6, "team_composition": 5.5, "execution_capability": 6,
        "scalability": 6, "risks": 5, "industry_trends": 7,
        "funding_clarity": 6, "previous_investment": 3, "investor_fit": 5,
    },
    "Scaling company": {
        "market_size": 9.5, "product_uniqueness": 9, "customer_validation": 10,
        "revenue_stage": 10, "gross_margins": 8, "financial_projections": 8.5,
        "founders_experience": 9, "team_composition": 8.5, "execution_capability": 9,
        "scalability": 9, "risks": 7.5, "industry_trends": 9,
        "funding_clarity": 9, "previous_investment": 8, "investor_fit": 8.5,
    },
}


def apply_profile(name: str):
    for f, v in SAMPLE_PROFILES[name].items():
        st.session_state[f"score_{f}"] = float(v)
    st.session_state.last_result = None
    st.session_state.last_playbook = None
    st.rerun()


def reset_form():
    for f in FIELD_NAMES:
        st.session_state[f"score_{f}"] = None
    st.session_state.last_result = None
    st.session_state.last_playbook = None
    st.rerun()


def render_score_section(cat):
    st.markdown(f"#### {cat.title} (Max: {cat.cap:g} points)")
    cols = st.columns(3)
    for col, (field, label) in zip(cols, cat.fields):
        with col:
            st.number_input(
                label,
                min_value=0.0,
                max_value=10.0,
                step=0.1,
                format="%.1f",
                key=f"score_{field}",
                placeholder="0 - 10",
            )
            v = st.session_state.get(f"score_{field}")
            if v is not None and not is_valid_score(v):
                st.caption(":red[Enter a value between 0 and 10]")


def render_overview(pb: dict):
    band = pb["band"]
    st.markdown(f'<div class="big-score">{pb["rounded_score"]}</div>', unsafe_allow_html=True)
    badge(band["label"], band["hex_color"])
    st.markdown(f'<div class="overview">{pb["summary"]}</div>', unsafe_allow_html=True)


def render_category_analysis(pb: dict):
    for row in pb["breakdown"]["categories"]:
        left, right = st.columns([0.75, 0.25])
        with left:
            st.markdown(f"**{row['title']}**")
        with right:
            st.caption(row["display"])
        bar(row["percent"])

    weak = pb["breakdown"]["weakest_categories"]
    if weak:
        st.caption("Weakest areas: " + ", ".join(w["title"] for w in weak))


def render_recommendations(pb: dict):
    items = [
        ("#3B82F6", "Next Steps", pb["next_steps"]),
        ("#22C55E", "Focus Areas", pb["focus_areas"]),
        ("#EAB308", "Funding Strategy", pb["funding_strategy"]),
    ]
    for color, title, text in items:
        st.markdown(
            f'<div class="rec-row"><div class="rec-dot" style="background:{color};"></div>'
            f"<div><b>{title}:</b> {text}</div></div>",
            unsafe_allow_html=True,
        )

    if pb["flags"]:
        st.warning("⚠️ Risk flags")
        for f in pb["flags"]:
            st.write(f"- {f}")

    st.markdown("##### Where to improve first")
    for a in pb["actions"]:
        st.markdown(f"**{a['title']}** ({a['percent']}% of max)")
        for step in a["recommended_actions"]:
            st.write(f"- {step}")


def render_comparative(pb: dict):
    comp = pb["comparative"]
    st.markdown("**Score Percentile**")
    left, right = st.columns([0.75, 0.25])
    with left:
        st.caption("YOUR SCORE")
    with right:
        st.caption(f"{comp['percentile']}%")
    bar(pb["total_score"], "#3B82F6")
    st.markdown(
        '<div class="scale">' + "".join(f"<span>{x}</span>" for x in comp["labels"]) + "</div>",
        unsafe_allow_html=True,
    )


# ----------------------------
# Page
# ----------------------------
def page_calculator():
    st.title(SETTINGS.page_title)
    st.caption("Enter scores from 0-10 for each category to calculate the overall funding score")

    p_cols = st.columns(len(SAMPLE_PROFILES) + 1)
    for col, name in zip(p_cols, SAMPLE_PROFILES):
        with col:
            if st.button(name, use_container_width=True, key=f"profile_{name}"):
                apply_profile(name)
    with p_cols[-1]:
        if st.button("Reset", use_container_width=True, key="btn_reset"):
            reset_form()

    for cat in CATEGORIES.values():
        render_score_section(cat)

    raw = current_inputs()
    check = check_inputs(raw)
    st.progress(check.completeness_pct / 100, text=f"Completeness: {check.completeness_pct}%")
    for msg in check.messages():
        st.error(msg)

    if st.button("Calculate Score", type="primary", use_container_width=True, disabled=not check.ok, key="btn_calc"):
        try:
            result = evaluate(raw, field_policy=SETTINGS.field_policy)
        except ScoreInputError as e:
            st.session_state.last_result = None
            st.session_state.last_playbook = None
            st.error(str(e))
        else:
            st.session_state.last_result = result
            st.session_state.last_playbook = build_playbook(result)
            logger.info("Calculated funding score %s", result.total_score)

    pb = st.session_state.last_playbook
    if not pb:
        return

    st.divider()
    st.markdown(render_gauge_svg(pb["total_score"]), unsafe_allow_html=True)

    with st.expander("Score Overview", expanded=True):
        render_overview(pb)
    with st.expander("Category Analysis"):
        render_category_analysis(pb)
    with st.expander("Key Recommendations"):
        render_recommendations(pb)
    with st.expander("Comparative Analysis"):
        render_comparative(pb)

    st.download_button(
        "Download PDF report",
        data=build_pdf_report(pb),
        file_name="funding_score_report.pdf",
        mime="application/pdf",
        key="btn_pdf",
    )


# ----------------------------
# Main app shell
# ----------------------------
page_calculator()
st.caption(f"Engine v{ENGINE_VERSION} • Ruleset v{RULESET_VERSION}")
