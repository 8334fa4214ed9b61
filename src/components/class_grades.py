"""Class Grade Tracker Component"""

import logging
import pandas as pd
import streamlit as st
from datetime import date
from src.database.database import get_db_session
from src.database.models import Exam, SchoolClass
from src.database.snapshot import load_class_snapshot, save_categories
from src.services.class_summary import summarize_class
from src.services.grade_calculator import (
    clamp_score, describe_needed_score, final_exam_score_needed,
    needed_score_outcome, validate_weights
)
from src.services.grade_status import status_color
from src.utils.constants import CATEGORY_WEIGHT_TOTAL, DEFAULT_CATEGORIES, TONE_COLORS
from src.utils.helpers import format_percent, format_weight_total
from src.components.ui.progress_bar import progress_bar

logger = logging.getLogger("studypilot.ui")


def _render_needed_scores(summary):
    """Needed average on remaining weight for A / B / C side by side"""
    progress = summary['progress']
    if progress['remaining_weight'] <= 0:
        st.caption("All graded - nothing left to change this grade.")
        return

    st.markdown("### 🎯 What You Need")
    cols = st.columns(len(summary['needed']))
    for col, (letter, needed) in zip(cols, summary['needed'].items()):
        outcome = needed_score_outcome(needed)
        with col:
            if outcome == 'achieved':
                st.success(f"**{letter}**: already secured")
            elif outcome == 'possible':
                st.info(f"**{letter}**: need {clamp_score(needed):.0f}%")
            else:
                st.error(f"**{letter}**: not possible")
    st.caption(f"Average needed on the remaining {progress['remaining_weight']:g}% of the grade")


def _render_final_calculator(current_grade):
    st.markdown("### 🧮 Final Exam Calculator")
    col1, col2 = st.columns(2)
    with col1:
        desired = st.number_input("Desired Final Grade (%)", min_value=0.0, max_value=100.0, value=90.0)
    with col2:
        final_weight = st.number_input("Final Exam Weight (%)", min_value=0.0, max_value=100.0, value=30.0)

    needed = final_exam_score_needed(current_grade or 0, desired, final_weight)
    feedback = describe_needed_score(needed)
    if feedback is None:
        st.caption("Enter a final exam weight above 0%.")
        return

    message, tone = feedback
    st.markdown(
        f"You need **{needed:.1f}%** on the final. "
        f"<span style='color: {TONE_COLORS[tone]}'>{message}</span>",
        unsafe_allow_html=True
    )


def _render_category_setup(db, class_id, categories):
    """Edit category weights; saving is blocked until they total 100%"""
    rows = categories or [dict(c, id=None) for c in DEFAULT_CATEGORIES]
    edited = st.data_editor(
        pd.DataFrame([{'id': c['id'], 'Category': c['name'], 'Weight (%)': c['weight']} for c in rows]),
        column_config={'id': None},
        num_rows="dynamic",
        hide_index=True,
        key=f"categories_{class_id}"
    )
    edited = edited.dropna(subset=['Category'])
    weights = pd.to_numeric(edited['Weight (%)'], errors='coerce').fillna(0).astype(float).tolist()
    check = validate_weights(weights, expected_total=CATEGORY_WEIGHT_TOTAL)

    if check['is_valid']:
        st.success(format_weight_total(check))
    else:
        st.error(format_weight_total(check))

    if st.button("Save Categories", disabled=not check['is_valid'], key=f"save_categories_{class_id}"):
        save_categories(db, class_id, [
            {'id': None if pd.isna(category_id) else int(category_id), 'name': name, 'weight': weight}
            for category_id, name, weight in zip(edited['id'], edited['Category'], weights)
        ])
        st.success("Categories saved!")
        st.rerun()


def _render_exams(db, snapshot):
    categories = {c['id']: c['name'] for c in snapshot['categories']}
    items = snapshot['items']

    if items:
        df = pd.DataFrame([
            {
                'Exam': item['name'],
                'Category': categories.get(item['category_id'], '-'),
                'Weight (%)': item['weight'],
                'Score': format_percent(item['score_percent']),
            }
            for item in items
        ])
        st.dataframe(df, hide_index=True, use_container_width=True)

    pending = [item for item in items if item['score_percent'] is None]
    if pending:
        with st.expander("✏️ Enter Score"):
            names = [item['name'] for item in pending]
            chosen = st.selectbox("Exam", names, key="score_exam")
            score = st.number_input("Score (%)", value=0.0, help="Scores above 100 count as extra credit")
            if st.button("Save Score"):
                exam_id = pending[names.index(chosen)]['id']
                exam = db.query(Exam).filter(Exam.id == exam_id).first()
                exam.grade_percent = score
                db.commit()
                st.success("Score saved!")
                st.rerun()

    with st.expander("➕ Add Exam"):
        name = st.text_input("Exam/Assignment Name")
        category_name = None
        if categories:
            category_name = st.selectbox("Category", list(categories.values()))
        weight = st.number_input(
            "Weight within category (%)" if categories else "Weight (% of grade)",
            min_value=0.0, max_value=100.0, value=20.0
        )
        exam_date = st.date_input("Date", value=date.today())
        graded = st.checkbox("Already graded")
        score = st.number_input("Score (%)", value=0.0, key="new_exam_score") if graded else None

        if st.button("Add Exam") and name.strip():
            category_id = next((cid for cid, cname in categories.items() if cname == category_name), None)
            db.add(Exam(
                class_id=snapshot['class']['id'],
                category_id=category_id,
                exam_name=name.strip(),
                exam_date=exam_date,
                weight=weight,
                grade_percent=score
            ))
            db.commit()
            st.success("Exam added!")
            st.rerun()


def render_class_grades():
    """Render per-class grade breakdown, targets and exam entry"""
    st.title("📈 Class Grades")

    db = get_db_session()
    user_id = st.session_state.user_id

    try:
        classes = db.query(SchoolClass).filter(
            SchoolClass.user_id == user_id,
            SchoolClass.status == "in_progress"
        ).order_by(SchoolClass.course_name).all()

        if not classes:
            st.info("No classes in progress. Add one on the 🎓 Degree page.")
            return

        names = [c.course_name for c in classes]
        selected = st.selectbox("Select Class", names)
        class_id = classes[names.index(selected)].id

        snapshot = load_class_snapshot(db, class_id)
        summary = summarize_class(snapshot['class'], snapshot['categories'], snapshot['items'])

        col1, col2 = st.columns(2)
        with col1:
            st.metric("Current Grade", format_percent(summary['current_grade']))
        with col2:
            st.metric("Projected Grade", format_percent(summary['projected_grade']))
        progress_bar(summary['current_grade'] or 0, color=status_color(summary['status']))

        if summary['uses_categories']:
            st.markdown("### 🗂️ Categories")
            if not summary['weight_check']['is_valid']:
                st.warning(format_weight_total(summary['weight_check']))
            for category in summary['category_grades']:
                st.markdown(
                    f"**{category['name']}** ({category['weight']:g}%): "
                    f"{format_percent(category['grade'])}"
                )

        _render_needed_scores(summary)
        _render_final_calculator(summary['current_grade'])

        with st.expander("⚙️ Grading Setup"):
            st.caption("Define how your final grade is calculated. Weights must total 100%.")
            _render_category_setup(db, class_id, snapshot['categories'])

        st.markdown("### 📝 Exams & Assignments")
        _render_exams(db, snapshot)

    except ValueError as e:
        logger.error("Class grades failed: %s", e)
        st.error(str(e))
    finally:
        db.close()
