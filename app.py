import streamlit as st

from training_quote.config import load_settings
from training_quote.constants import (
    ADMIN_PERCENTAGE,
    APP_TITLE,
    APP_VERSION,
    DURATION_LABELS,
    LOCATION_LABELS,
    MEAL_ALLOWANCE_PER_DAY,
    MILEAGE_RATE,
    PM_RATE,
    ROLE_LABELS,
    TRAINING_TYPE_LABELS,
    TRAVEL_COSTING_LABELS,
    TRAVEL_FEES,
    DurationBucket,
    TrainerLocation,
    TrainerRole,
    TrainingType,
    TravelCosting,
    TravelTime,
)
from training_quote.export import breakdown_table, export_quote, format_amount, generate_pdf
from training_quote.logging_config import setup_logging
from training_quote.models import (
    Selection,
    add_trainer,
    default_selection,
    remove_trainer,
    update_trainer,
    update_travel,
)
from training_quote.pricing import (
    compute_breakdown,
    suggested_meal_allowance,
    suggested_mileage_cost,
    trainer_fee,
    trainer_travel_cost,
    travel_components,
)

# =========================================================
# STREAMLIT CONFIG
# =========================================================
settings = load_settings()
setup_logging(settings.log_level, settings.json_logs)

st.set_page_config(page_title=APP_TITLE, layout="centered")
st.title(APP_TITLE)
st.caption(f"Training quotes with itemized trainer, travel and project management costs ({APP_VERSION})")

# =========================================================
# FORM STATE
# =========================================================
if "trainers" not in st.session_state:
    st.session_state.trainers = default_selection(settings.travel_costing).trainers


def _add_trainer():
    st.session_state.trainers = add_trainer(st.session_state.trainers)


def _remove_trainer(trainer_id):
    st.session_state.trainers = remove_trainer(st.session_state.trainers, trainer_id)


def money(x):
    return f"${format_amount(x)}"


# =========================================================
# SESSION
# =========================================================
st.subheader("A. Session")

training_type = st.radio(
    "Training Type",
    [t.value for t in TrainingType],
    format_func=lambda v: TRAINING_TYPE_LABELS[TrainingType(v)],
    horizontal=True,
    key="training_type",
)
in_person = training_type == TrainingType.IN_PERSON.value

duration = st.selectbox(
    "Duration",
    [d.value for d in DurationBucket],
    format_func=lambda v: DURATION_LABELS[DurationBucket(v)],
    key="duration",
)

costing_options = [c.value for c in TravelCosting]
travel_costing = st.radio(
    "Travel Costing",
    costing_options,
    index=costing_options.index(settings.travel_costing.value),
    format_func=lambda v: TRAVEL_COSTING_LABELS[TravelCosting(v)],
    horizontal=True,
    key="travel_costing",
    disabled=not in_person,
)
itemized = travel_costing == TravelCosting.ITEMIZED.value

travel_time = TravelTime.LOCAL.value
if in_person and not itemized:
    travel_time = st.selectbox(
        "Travel Time",
        [t.value for t in TravelTime],
        format_func=lambda v: f"{v} (${TRAVEL_FEES[TravelTime(v)]:,}/person)",
        key="travel_time",
    )

# =========================================================
# TRAINERS
# =========================================================
st.subheader("B. Trainers")

roles = [r.value for r in TrainerRole]
locations = [loc.value for loc in TrainerLocation]
trainers = st.session_state.trainers

for line in st.session_state.trainers:
    with st.container(border=True):
        cols = st.columns([3, 3, 2, 1])
        with cols[0]:
            role = st.selectbox(
                "Role", roles,
                index=roles.index(line.role.value),
                format_func=lambda v: ROLE_LABELS[TrainerRole(v)],
                key=f"role_{line.id}",
            )
        with cols[1]:
            location = line.location.value
            if in_person and itemized:
                location = st.selectbox(
                    "Location", locations,
                    index=locations.index(location),
                    format_func=lambda v: LOCATION_LABELS[TrainerLocation(v)],
                    key=f"location_{line.id}",
                )
        with cols[2]:
            count = st.number_input("Count", min_value=1, value=line.count, step=1, key=f"count_{line.id}")
        with cols[3]:
            if len(st.session_state.trainers) > 1:
                st.button("Remove", key=f"remove_{line.id}", on_click=_remove_trainer, args=(line.id,))

        trainers = update_trainer(trainers, line.id, role=role, location=location, count=count)

        if in_person and itemized and location == TrainerLocation.TRAVELING.value:
            st.markdown("**Travel Details (per person)**")
            t = line.travel
            tc = st.columns(3)
            with tc[0]:
                needs_flight = st.checkbox("Needs Flight", value=t.needs_flight, key=f"flight_{line.id}")
                flight_cost = t.flight_cost
                if needs_flight:
                    flight_cost = st.number_input("Flight Cost", min_value=0.0, value=float(t.flight_cost), key=f"flight_cost_{line.id}")
                lodging_nights = st.number_input("Lodging Nights", min_value=0, value=t.lodging_nights, step=1, key=f"nights_{line.id}")
            with tc[1]:
                lodging_cost = st.number_input("Cost per Night", min_value=0.0, value=float(t.lodging_cost_per_night), key=f"night_cost_{line.id}")
                mileage_cost = st.number_input("Mileage Cost", min_value=0.0, value=float(t.mileage_cost), key=f"mileage_{line.id}")
                miles = st.number_input(f"Or miles at ${MILEAGE_RATE}/mile", min_value=0.0, value=0.0, key=f"miles_{line.id}")
                if miles > 0:
                    mileage_cost = suggested_mileage_cost(miles)
                    st.caption(f"Mileage: {money(mileage_cost)}")
            with tc[2]:
                meal_allowance = st.number_input("Meal Allowance", min_value=0.0, value=float(t.meal_allowance), key=f"meals_{line.id}")
                meal_days = st.number_input(f"Or days at ${MEAL_ALLOWANCE_PER_DAY}/day", min_value=0, value=0, step=1, key=f"meal_days_{line.id}")
                if meal_days > 0:
                    meal_allowance = suggested_meal_allowance(meal_days)
                    st.caption(f"Meals: {money(meal_allowance)}")
                other_expenses = st.number_input("Other Expenses", min_value=0.0, value=float(t.other_expenses), key=f"other_{line.id}")
                st.caption("Parking, taxi, etc.")

            trainers = update_travel(
                trainers, line.id,
                needs_flight=needs_flight,
                flight_cost=flight_cost,
                lodging_nights=lodging_nights,
                lodging_cost_per_night=lodging_cost,
                mileage_cost=mileage_cost,
                meal_allowance=meal_allowance,
                other_expenses=other_expenses,
            )

st.session_state.trainers = trainers
st.button("Add Trainer", key="add_trainer", on_click=_add_trainer)

# =========================================================
# PROJECT MANAGEMENT
# =========================================================
st.subheader("C. Project Management")

pm_hours = st.number_input("Project Management Hours", min_value=0.0, value=0.0, step=0.5, key="pm_hours")
st.caption(f"Rate: ${PM_RATE}/hour")

selection = Selection(
    training_type=training_type,
    duration=duration,
    trainers=trainers,
    pm_hours=pm_hours,
    travel_costing=travel_costing,
    travel_time=travel_time,
)
breakdown = compute_breakdown(selection)

# =========================================================
# PRICE BREAKDOWN
# =========================================================
st.subheader("D. Price Breakdown")

st.markdown("**Trainer Fees**")
for line in selection.trainers:
    st.write(f"{ROLE_LABELS[line.role]} ({line.count}x): {money(trainer_fee(selection, line))}")

if in_person and breakdown.traveling_count > 0:
    st.markdown("**Travel Costs (Estimated)**")
    for line in selection.trainers:
        cost = trainer_travel_cost(selection, line)
        if itemized and line.location is TrainerLocation.LOCAL:
            continue
        st.write(f"{ROLE_LABELS[line.role]} ({line.count}x): {money(cost)}")
        parts = travel_components(line) if itemized else []
        if parts:
            st.caption(" • ".join(f"{name}: {money(amount)}" for name, amount in parts))

st.table(breakdown_table(selection, breakdown))

c1, c2, c3 = st.columns(3)
c1.metric("Subtotal", money(breakdown.subtotal))
c2.metric(f"Administrative Cost ({ADMIN_PERCENTAGE:.0%})", money(breakdown.admin_cost))
c3.metric("Total", money(breakdown.total))

# =========================================================
# EXPORT
# =========================================================
st.subheader("E. Export")

csv_name, csv_bytes = export_quote(selection)
st.download_button(
    label="Export to CSV",
    data=csv_bytes,
    file_name=csv_name,
    mime="text/csv",
    key="export_csv",
)

pdf_bytes = generate_pdf(selection, breakdown)
st.download_button(
    label="Download Quote as PDF",
    data=pdf_bytes,
    file_name=csv_name.replace(".csv", ".pdf"),
    mime="application/pdf",
    key="export_pdf",
)
