from datetime import date, datetime, time, timedelta

from django.utils import timezone

from agenda.core.domain.entities.booking_entity import BookingEntity
from agenda.core.domain.repositories.booking_repository import BookingRepository
from plugins.django_interface.models import Appointment


class BookingRepoImpl(BookingRepository):
    def list_for_day(self, professional_id: str, day: date) -> list[BookingEntity]:
        tz = timezone.get_current_timezone()
        start_of_day = timezone.make_aware(datetime.combine(day, time.min), tz)
        end_of_day = start_of_day + timedelta(days=1)

        qs = (
            Appointment.objects
            .filter(
                dentist_id=professional_id,
                appointment_date__gte=start_of_day,
                appointment_date__lt=end_of_day,
            )
            .exclude(status=Appointment.Status.CANCELLED)
            .order_by("appointment_date")
            .values_list("appointment_date", "duration_minutes")
        )
        return [
            BookingEntity(start=timezone.localtime(start, tz), duration_minutes=duration)
            for start, duration in qs
        ]
