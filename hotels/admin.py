from django.contrib import admin

from hotels.models import Enrollment, Hotel, Room, Ticket, TicketType


class RoomInline(admin.TabularInline):
    model = Room
    extra = 1


class TicketInline(admin.TabularInline):
    model = Ticket
    extra = 0


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = ["name", "created_at", "updated_at"]
    search_fields = ["name"]
    inlines = [RoomInline]


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ["name", "hotel", "capacity"]
    list_filter = ["hotel"]


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):
    list_display = ["name", "price", "is_remote", "includes_hotel"]
    list_filter = ["is_remote", "includes_hotel"]


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    list_display = ["name", "user", "created_at"]
    search_fields = ["name", "cpf"]
    inlines = [TicketInline]
